# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient
from api.main import create_app
from core.config import Settings

@pytest.fixture
def settings():
    return Settings(_env_file=None, database_url="sqlite://", service_name="bookshelf-test", log_level="INFO")

@pytest.fixture
def client(settings, database):
    """Test client bound to the in-memory test database"""
    app = create_app(settings, database)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

@pytest.fixture
def created_author(client):
    response = client.post("/author/", json={"penName": "Gene Wolfe", "birthYear": 1931})
    assert response.status_code == 201
    return response.json()["data"]
