import pytest
from fastapi.testclient import TestClient

from config.settings import config


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """Cheap bcrypt and a known secret for every test."""
    monkeypatch.setattr(config, "bcrypt_rounds", 4)
    monkeypatch.setattr(config, "jwt_secret", "test-secret")
    monkeypatch.setattr(config, "jwt_expiry_seconds", 3600)
    monkeypatch.setattr(config, "protect_user_routes", False)
    monkeypatch.setattr(config, "unique_usernames", False)


@pytest.fixture
def make_client():
    """Build a fresh app (and so a fresh, empty store) from the current config."""
    from main import create_app

    clients = []

    def _make() -> TestClient:
        client = TestClient(create_app())
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
