# tests/conftest.py
import os
import tempfile

# Keep the app's own engine off disk and skip the startup seed.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.db import Base, get_db
from app.models import RawProduct


# --- Temporary SQLite DB file for the whole test session ---
@pytest.fixture(scope="session")
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture(scope="session")
def engine(tmp_db_url):
    eng = create_engine(tmp_db_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    return eng


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    _clear_all(db)
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB dependency to use our test session ---
@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db():
        try:
            yield db_session
        finally:
            pass
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _clear_all(db):
    db.execute(text("DELETE FROM raw_products"))
    db.commit()


# Raw records as they might arrive from a messy upstream feed.
SAMPLE_RAW = [
    {"id": "p1", "name": "Widget", "price": 9.99, "stock": 5,
     "category": "Gadgets", "updatedAt": "2024-01-01T00:00:00Z"},           # clean
    {"id": "p2", "name": "", "price": "19,99", "stock": -3,
     "category": ["Toys", "Games"], "updatedAt": "not-a-date"},             # score 80
    {"id": "p3", "name": "Lamp", "price": 25, "stock": 0,
     "category": "Home", "updatedAt": "2024-02-01T12:00:00Z"},              # clean, out of stock
    {"id": "p4", "name": "Robot Kit", "price": "abc", "stock": 0,
     "category": "Toys", "updatedAt": "2024-03-01T00:00:00Z"},              # score 30, out of stock
    {"id": "p5", "name": "Yoga Mat", "price": -5, "stock": 12,
     "category": None, "updatedAt": "2024-01-15T08:30:00Z"},                # score 15
    {"id": "p6", "name": "Gadget Pro", "price": 120.5, "stock": 3,
     "category": "Gadgets", "updatedAt": "2024-04-01T00:00:00Z"},           # clean
]


@pytest.fixture
def seed_sample(db_session):
    """Seeds a small mix of clean and glitchy raw products."""
    db_session.add_all([
        RawProduct(
            id=r["id"], name=r["name"], price=r["price"], stock=r["stock"],
            category=r["category"], updated_at=r["updatedAt"],
        )
        for r in SAMPLE_RAW
    ])
    db_session.commit()
    return SAMPLE_RAW
