# tests/conftest.py
import os
import tempfile
from datetime import datetime
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from vehicle_import.main import app
from vehicle_import.db import Base, get_db
from vehicle_import.models import Vehicle


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


# --- Utility: empty the table (ids restart at 1 on SQLite without AUTOINCREMENT) ---
def _clear_all(db):
    db.execute(text("DELETE FROM vehicles"))
    db.commit()


@pytest.fixture
def seed_sample(db_session):
    """Three stored vehicles from two providers, in insertion order."""
    vehicles = [
        Vehicle(provider="acme", uuid="a-1", vin="1HGCM82633A004352", make="Honda",
                model="Accord", mileage="42000", year="2019", price=20000.0, zip_code="94107",
                create_date=datetime(2023, 1, 15)),
        Vehicle(provider="acme", uuid="a-2", vin="JH4KA7561PC008269", make="Acura",
                model="Legend", mileage="150000", year="1993", price=3500.5, zip_code="10001"),
        Vehicle(provider="autoland", uuid="b-1", vin="5YJ3E1EA7KF317000", make="Tesla",
                model="Model 3", mileage="12000", year="2020", price=None, zip_code=None),
    ]
    db_session.add_all(vehicles)
    db_session.commit()
    return vehicles
