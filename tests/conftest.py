import datetime
import os

# main.py tables import time pe banata hai, file DB nahi chahiye
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from services.providers import get_today

FIXED_TODAY = datetime.date(2024, 3, 15)

ADMIN = {"X-User-Role": "Admin"}
ACCOUNTS = {"X-User-Role": "Accounts Officer"}


@pytest.fixture
def fixed_today():
    return FIXED_TODAY


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session, fixed_today):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: fixed_today
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def student_payload(**overrides):
    data = {
        "id": "s001",
        "name": "Alice Smith",
        "class": 6,
        "section": "GOLAP",
        "roll": 1,
        "tuitionFee": 500,
        "status": "active",
        "admissionMonth": "January",
    }
    data.update(overrides)
    return data


def payment_payload(**overrides):
    data = {
        "receiptNo": "R-1",
        "year": 2024,
        "date": "2024-03-01",
        "studentId": "S001",
        "feeType": "TUITION FEE",
        "month": "January",
        "amount": 500,
    }
    data.update(overrides)
    return data
