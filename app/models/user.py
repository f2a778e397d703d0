from datetime import datetime, timezone
from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    external_id: Mapped[int] = mapped_column(unique=True, index=True, nullable=False)
    login: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Ukazatele mění pouze reconciler, nikdy přímo API
    current_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL", use_alter=True, name="fk_users_current_location_id"),
        nullable=True,
    )
    last_location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL", use_alter=True, name="fk_users_last_location_id"),
        nullable=True,
    )
    current_campus_id: Mapped[int | None] = mapped_column(
        ForeignKey("campuses.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    locations: Mapped[list["Location"]] = relationship(
        foreign_keys="Location.user_id", back_populates="user"
    )
    current_location: Mapped["Location | None"] = relationship(
        foreign_keys=[current_location_id], post_update=True
    )
    last_location: Mapped["Location | None"] = relationship(
        foreign_keys=[last_location_id], post_update=True
    )
    current_campus: Mapped["Campus | None"] = relationship(foreign_keys=[current_campus_id])
