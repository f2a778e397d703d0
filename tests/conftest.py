import pytest
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base
import app.models  # noqa — register all models
from app.models.campus import Campus
from app.schemas.location_event import LocationEvent, LocationPayload, WebhookMetadata


TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db():
    engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(engine)


@pytest.fixture
def campus(db):
    c = Campus(external_id=7, name="Praha", time_zone="Europe/Prague", country="Czech Republic")
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


@pytest.fixture
def make_payload():
    """Továrna na location payload; výchozí hodnoty odpovídají scénáři alice @ kampus 7."""

    def _make(
        ext_id: int = 42,
        login: str = "alice",
        user_id: int = 1001,
        campus_id: int = 7,
        host: str = "c1r1s1",
        begin_at: datetime = datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc),
        end_at: datetime | None = None,
    ) -> LocationPayload:
        return LocationPayload(
            id=ext_id,
            begin_at=begin_at,
            end_at=end_at,
            host=host,
            campus_id=campus_id,
            user={"id": user_id, "login": login, "url": f"https://api.example.org/v2/users/{login}"},
        )

    return _make


@pytest.fixture
def make_event(make_payload):
    def _make(kind, delivery_id: str | None = None, **kwargs) -> LocationEvent:
        metadata = WebhookMetadata(event=kind, delivery_id=delivery_id)
        return LocationEvent.from_delivery(make_payload(**kwargs), metadata)

    return _make
