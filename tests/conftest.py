import pytest
from fastapi.testclient import TestClient

from formbot.config import Settings
from formbot.database import Database
from formbot.main import create_app


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret-key",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=60,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture()
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture()
def client(app):
    # entering the context runs startup, which creates the tables
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def session_factory(client, app):
    """Opens sessions on the same in-memory database the app is using."""
    return app.state.db.sessionlocal


@pytest.fixture()
def db():
    """A standalone session for service-level tests."""
    database = Database("sqlite://")
    database.create_all()
    session = database.sessionlocal()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture()
def signup(client):
    def _signup(username="alice", email="a@x.com", password="pw1"):
        return client.post("/signup", json={"username": username, "email": email, "password": password})
    return _signup


@pytest.fixture()
def auth_headers(signup) -> dict:
    response = signup()
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
