"""
Pytest configuration and fixtures for backend testing
"""

import pytest
import os
import tempfile
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from sqlalchemy.pool import NullPool

# Set test environment before the app builds its engine
_TEST_DB_DIR = tempfile.mkdtemp()
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["AUTO_CREATE_TABLES"] = "true"

from app.main import app
from app.db.config import get_session
from app.models.persisted_course import Base as PersistedBase
from app.repositories.course_repo import InMemoryCourseRepository
from app.services.course_lifecycle import CourseLifecycleManager


@pytest.fixture(scope="session")
def test_client():
    """Create a test client for FastAPI application"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def session_factory(tmp_path):
    """Session factory bound to a fresh SQLite file with the schema created."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/courses.db",
        future=True,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(PersistedBase.metadata.create_all)

    yield async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    await engine.dispose()


@pytest.fixture
async def test_app(session_factory):
    """The real app with its DB session dependency pointed at a fresh database."""
    async def override_session():
        async with session_factory() as session:  # type: ignore
            yield session

    app.dependency_overrides[get_session] = override_session
    yield app
    app.dependency_overrides.clear()


class FakeClock:
    """Deterministic clock; each call advances by ``step``."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2025, 1, 1, 10, 0, 0)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    return InMemoryCourseRepository()


@pytest.fixture
def manager(memory_store, clock):
    """Lifecycle manager over the in-memory store"""
    return CourseLifecycleManager(memory_store, clock=clock)


@pytest.fixture
def sample_course_payload():
    return {"name": "Intro to Go", "status": "scheduled"}


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


# Helper functions for tests
def assert_response_success(response, expected_status=200):
    """Assert that response is successful"""
    assert response.status_code == expected_status, f"Expected {expected_status}, got {response.status_code}: {response.text}"


def assert_response_error(response, expected_status=400):
    """Assert that response is an error"""
    assert response.status_code == expected_status, f"Expected error {expected_status}, got {response.status_code}"
    assert response.json()["success"] is False
