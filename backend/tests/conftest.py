"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite database file (aiosqlite) under tmp_path
    - The API client talks to an app whose store handle is the test database
    - No test reaches a real database server

Design Decisions:
    - File-backed SQLite over :memory: — every pooled connection sees the same data
    - app.state.db set directly: ASGITransport does not run the lifespan
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests never pick up a developer's real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./ems-test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from ems.config import Settings  # noqa: E402
from ems.infrastructure.database import DatabaseSessionManager  # noqa: E402
from ems.main import create_app  # noqa: E402
from ems.repositories.employee_repository import SqlEmployeeRepository  # noqa: E402


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'ems.db'}"


@pytest.fixture
async def db_manager(database_url):
    manager = DatabaseSessionManager(database_url)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def repo(test_db):
    return SqlEmployeeRepository(test_db)


@pytest.fixture
def app(database_url, db_manager):
    application = create_app(
        Settings(database_url=database_url, log_format="text"),
    )
    application.state.db = db_manager
    return application


@pytest.fixture
async def client(app):
    """API client over ASGI, sharing the test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
