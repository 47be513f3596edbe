# tests/test_api/test_app.py
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from core.request_context import REQUEST_ID_HEADER

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["checks"] == {"database": "ok"}
    assert body["timestamp"]

def test_health_database_down(client, database):
    with patch.object(database, "ping", side_effect=OperationalError("SELECT 1", {}, Exception("down"))):
        response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["checks"] == {"database": "down"}

def test_request_id_echoed(client):
    response = client.get("/health", headers={REQUEST_ID_HEADER: "abc-123"})
    assert response.headers[REQUEST_ID_HEADER] == "abc-123"

def test_request_id_generated(client):
    assert client.get("/health").headers[REQUEST_ID_HEADER]

def test_unhandled_error_uses_envelope(client):
    with patch("core.services.author.AuthorService.get_author_by_id", side_effect=RuntimeError("boom")):
        response = client.get("/author/8a4c2e0e-6a5c-4bb1-9a51-1d5a3c0f6b2e")
    assert response.status_code == 500
    assert response.json() == {"code": "50000", "message": "Internal Server Error"}

def test_storage_error_is_internal_error(client, database):
    """Services turn storage failures into the internal error code"""
    database.drop_db()
    response = client.post("/author/", json={"penName": "Anyone", "birthYear": 1950})
    assert response.status_code == 500
    assert response.json()["code"] == "50000"
    database.init_db()
