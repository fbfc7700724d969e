import os
import sys
import tempfile
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# The app's own engine is never used in tests; keep it off the default Postgres URL
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")

from station_service.db import Base, get_session
from station_service.main import app
from station_service.models import Station
from station_service.store import new_object_id

SEED_STATIONS = [
    {"name": "First test station", "freq": 123.456, "actual": False},
    {"name": "Second test station", "freq": 987.456, "actual": True},
    {"name": "Third test station", "freq": 1987.456, "actual": False},
]


@pytest.fixture(scope="session")
def db_engine():
    # Use SQLite file to persist across tests in session
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite+pysqlite:///{path}"
    engine = create_engine(url, connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()
    try:
        os.remove(path)
    except PermissionError:
        # Windows may still hold the file
        pass


@pytest.fixture()
def db_session(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def seeded_stations(db_session):
    """Clear the collection and insert the three fixture stations before every test."""
    db_session.query(Station).delete()
    rows = [Station(id=new_object_id(), **fields) for fields in SEED_STATIONS]
    db_session.add_all(rows)
    db_session.commit()
    seeded = [{"id": r.id, **fields} for r, fields in zip(rows, SEED_STATIONS)]
    # Tests read state back through the same session after requests commit
    db_session.expire_all()
    return seeded


@pytest.fixture(autouse=True)
def override_dependency(db_session):
    def _get_session_override():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_session] = _get_session_override
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)
