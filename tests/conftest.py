"""Pytest configuration and fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from database import SessionLocal, engine
from main import app
from models import Base


HERO = {"email": "hero@example.com", "password": "s3cret-pass", "heroName": "Aqua Knight"}


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table so each test starts from an empty store."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def registered_user(client):
    response = client.post("/register", json=HERO)
    assert response.status_code == 200
    return dict(HERO)


@pytest.fixture
def auth_headers(client, registered_user):
    response = client.post(
        "/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
