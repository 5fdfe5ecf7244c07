"""
Employee App Backend: Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Real endpoint tests run against a throwaway SQLite file (aiosqlite) per
       test; service unit tests use a mocked AsyncSession.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── database_url:    sqlite+aiosqlite URL inside tmp_path
    ├── database:        Database handle with the schema already created
    └── test_client:     HTTPX AsyncClient wired to an app using `database`
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="employee_app_test_"), "app.db")
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from employee_app.database import Database  # noqa: E402
from employee_app.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def database_url(tmp_path):
    """A fresh SQLite database file for each test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    """Database handle with the employees table bootstrapped."""
    db = Database(database_url)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the schema comes from the
    `database` fixture instead of startup.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/employees")
            assert response.status_code == 200
    """
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
