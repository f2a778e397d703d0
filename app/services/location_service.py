from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from app.database import dialect_insert
from app.models.campus import Campus
from app.models.location import Location
from app.models.user import User
from app.schemas.location_event import LocationPayload

# Sloupce přepisované při opakovaném doručení stejné location
_UPSERT_COLUMNS = (
    "campus_id",
    "user_id",
    "begin_at",
    "end_at",
    "identifier",
    "user_external_id",
    "user_external_login",
    "updated_at",
)


def get_location_by_external_id(db: Session, external_id: int) -> Location | None:
    return db.scalar(select(Location).where(Location.external_id == external_id))


def upsert_location(db: Session, loc: LocationPayload, campus: Campus, user: User) -> int:
    """INSERT … ON CONFLICT (external_id) DO UPDATE, vrací interní ID řádku."""
    now = datetime.now(timezone.utc)
    stmt = dialect_insert(db, Location).values(
        external_id=loc.id,
        campus_id=campus.id,
        user_id=user.id,
        begin_at=loc.begin_at,
        end_at=loc.end_at,
        identifier=loc.host,
        user_external_id=loc.user.id,
        user_external_login=user.login,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Location.external_id],
        set_={col: stmt.excluded[col] for col in _UPSERT_COLUMNS},
    )
    db.execute(stmt)
    return db.scalar(select(Location.id).where(Location.external_id == loc.id))


def close_location(db: Session, loc: LocationPayload) -> int:
    values = {"identifier": loc.host, "updated_at": datetime.now(timezone.utc)}
    if loc.end_at is not None:
        values["end_at"] = loc.end_at
    result = db.execute(
        update(Location).where(Location.external_id == loc.id).values(**values)
    )
    return result.rowcount


def delete_location(db: Session, external_id: int) -> int:
    location_id = db.scalar(select(Location.id).where(Location.external_id == external_id))
    if location_id is None:
        return 0
    # Žádný ukazatel nesmí přežít fyzické smazání řádku
    db.execute(
        update(User).where(User.current_location_id == location_id).values(current_location_id=None)
    )
    db.execute(
        update(User).where(User.last_location_id == location_id).values(last_location_id=None)
    )
    result = db.execute(delete(Location).where(Location.id == location_id))
    return result.rowcount


def set_user_pointers(
    db: Session,
    user_id: int,
    location_id: int,
    campus_id: int,
    current: bool = True,
) -> None:
    values = {"last_location_id": location_id, "updated_at": datetime.now(timezone.utc)}
    if current:
        values["current_location_id"] = location_id
        values["current_campus_id"] = campus_id
    db.execute(update(User).where(User.id == user_id).values(**values))


def clear_current_location(db: Session, user_id: int, location_id: int | None = None) -> None:
    """Zruší current_location uživatele; s location_id jen pokud ukazuje právě na ni."""
    query = update(User).where(User.id == user_id)
    if location_id is not None:
        query = query.where(User.current_location_id == location_id)
    db.execute(query.values(current_location_id=None, updated_at=datetime.now(timezone.utc)))
