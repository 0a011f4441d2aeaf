"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.config import get_settings
from src.database import Base, get_db
from src.main import app

API_KEY_HEADERS = {"api-key": get_settings().api_key}
PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the user and session ids."""

    def __init__(
        self, *args, user_id: int | None = None, session_id: str | None = None, **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.session_id = session_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/recipe_catalog", "/recipe_catalog_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    # Start from the current schema even if an older test database is left over
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(
    client: TestClient, username: str, role: str = "USER", name: str | None = None
) -> AuthHeaders:
    """Register an account, log in and return headers for its session."""
    response = client.post(
        "/api/v1/register",
        headers=API_KEY_HEADERS,
        json={
            "name": name or f"{username.title()} Cook",
            "email": f"{username}@example.com",
            "username": username,
            "role": role,
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    user_id = response.json()["data"]["id"]

    response = client.post(
        "/api/v1/login",
        headers=API_KEY_HEADERS,
        json={"emailOrUsername": username, "password": PASSWORD},
    )
    assert response.status_code == 200, response.text
    session_id = response.json()["data"]["sessionId"]

    return AuthHeaders(
        {**API_KEY_HEADERS, "Authorization": f"Bearer {session_id}"},
        user_id=user_id,
        session_id=session_id,
    )


@pytest.fixture
def auth_headers(client):
    """Headers for a regular USER account."""
    return register_and_login(client, "testcook")


@pytest.fixture
def other_headers(client):
    """Headers for a second USER account."""
    return register_and_login(client, "othercook")


@pytest.fixture
def register_user(client):
    """Factory fixture registering and logging in extra accounts."""

    def _register(username: str, role: str = "USER") -> AuthHeaders:
        return register_and_login(client, username, role=role)

    return _register


@pytest.fixture
def admin_headers(client):
    """Headers for an ADMIN account."""
    return register_and_login(client, "chefadmin", role="ADMIN")


@pytest.fixture
def catalog(client, admin_headers):
    """Seed categories and ingredients through the admin API; return their ids by name."""
    ids = {}
    for resource, names in (
        ("categories", ["Dessert", "Breakfast", "Vegan"]),
        ("ingredients", ["Flour", "Sugar", "Egg", "Butter"]),
    ):
        for name in names:
            response = client.post(
                f"/api/v1/{resource}", headers=admin_headers, json={"name": name}
            )
            assert response.status_code == 201, response.text
            ids[name.lower()] = response.json()["data"]["id"]
    return ids


def create_recipe(client: TestClient, headers: dict, title: str, **fields) -> dict:
    """Create a recipe through the API and return its response data."""
    payload = {
        "title": title,
        "description": fields.pop("description", f"How to make {title.lower()}"),
        "servings": 2,
        "cookingTime": 30,
    }
    payload.update(fields)
    response = client.post("/api/v1/recipes", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]
