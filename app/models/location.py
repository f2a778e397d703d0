from datetime import datetime, timezone
from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base


class Location(Base):
    """Session uživatele na pracovní stanici; end_at IS NULL = session je otevřená."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    external_id: Mapped[int] = mapped_column(unique=True, index=True, nullable=False)
    campus_id: Mapped[int] = mapped_column(ForeignKey("campuses.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    begin_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    # Snapshot uživatele v okamžiku vytvoření session
    user_external_id: Mapped[int] = mapped_column(nullable=False)
    user_external_login: Mapped[str] = mapped_column(String(64), nullable=False)
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

    campus: Mapped["Campus"] = relationship(back_populates="locations")
    user: Mapped["User"] = relationship(foreign_keys=[user_id], back_populates="locations")

    @property
    def is_open(self) -> bool:
        return self.end_at is None
