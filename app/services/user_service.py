from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.database import dialect_insert
from app.errors import UserNotFoundError
from app.models.user import User
from app.schemas.location_event import LocationPayload


def get_user_by_external_id(db: Session, external_id: int) -> User | None:
    return db.scalar(select(User).where(User.external_id == external_id))


def find_user_by_external_id(db: Session, external_id: int) -> User:
    user = get_user_by_external_id(db, external_id)
    if not user:
        raise UserNotFoundError(external_id)
    return user


def find_or_create_user_from_location(db: Session, loc: LocationPayload) -> User:
    """Idempotentní upsert uživatele podle externího ID (jeden INSERT … ON CONFLICT)."""
    now = datetime.now(timezone.utc)
    stmt = dialect_insert(db, User).values(
        external_id=loc.user.id,
        login=loc.user.login,
        url=loc.user.url,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[User.external_id],
        set_={
            "login": stmt.excluded.login,
            "url": stmt.excluded.url,
            "updated_at": stmt.excluded.updated_at,
        },
    )
    db.execute(stmt)
    db.commit()
    return get_user_by_external_id(db, loc.user.id)
