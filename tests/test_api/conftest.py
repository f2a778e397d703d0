import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.database import Base, get_db
from app.models.campus import Campus

TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_session():
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Ensure all connections share same in-memory DB
    )
    Base.metadata.create_all(engine)
    TestSession = sessionmaker(bind=engine)

    # Kampus pro webhooky (externí ID 7)
    db = TestSession()
    db.add(Campus(external_id=7, name="Praha", time_zone="Europe/Prague"))
    db.commit()
    db.close()

    yield TestSession

    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def client(test_session):
    def override_get_db():
        db = test_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def location_body():
    def _make(ext_id=42, login="alice", user_id=1001, campus_id=7, end_at=None, host="c1r1s1"):
        return {
            "id": ext_id,
            "begin_at": "2024-01-15T08:00:00.000Z",
            "end_at": end_at,
            "primary": True,
            "host": host,
            "campus_id": campus_id,
            "user": {
                "id": user_id,
                "login": login,
                "url": f"https://api.example.org/v2/users/{login}",
            },
        }

    return _make
