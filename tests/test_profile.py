"""Tests for the profile endpoint"""
from fastapi.testclient import TestClient

from api.auth import create_access_token
from main import app
from models import User


def test_profile_hides_credentials(client, auth_headers, registered_user):
    response = client.get("/profile", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == registered_user["email"]
    assert data["heroName"] == "Aqua Knight"
    assert data["stats"] == {"strength": 5, "stamina": 5, "agility": 5}
    assert data["level"] == 1
    assert data["xp"] == 0
    assert data["waterIntake"] == []
    assert data["workouts"] == []
    assert "hashed_password" not in data
    assert "password" not in data
    assert registered_user["password"] not in response.text


def test_profile_of_deleted_user_is_not_found(client, auth_headers, db_session, registered_user):
    user = db_session.query(User).filter_by(email=registered_user["email"]).one()
    db_session.delete(user)
    db_session.commit()

    response = client.get("/profile", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "User not found"}


def test_token_for_unknown_user_is_not_found(client):
    token = create_access_token({"sub": "nobody@example.com", "uid": 999})

    response = client.post(
        "/log-water",
        json={"cups": 1},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 404


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unexpected_error_returns_json_500(auth_headers, monkeypatch):
    def broken_serializer(user):
        raise RuntimeError("boom")

    monkeypatch.setattr("api.profile.serialize_user", broken_serializer)

    with TestClient(app, raise_server_exceptions=False) as lenient_client:
        response = lenient_client.get("/profile", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error"}
