"""
Pytest configuration and fixtures.
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from jobdesk.api.app import create_app
from jobdesk.application.interfaces.repositories import (
    AnswerRepositoryInterface,
    JobQuestionRepositoryInterface,
    JobRepositoryInterface,
    QuestionRepositoryInterface,
)
from jobdesk.config.database import get_async_session_factory, get_db_session
from jobdesk.config.settings import settings
from jobdesk.infrastructure.database.models import Base

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Keep bcrypt cheap in tests."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Session factory configured like the application's."""
    return get_async_session_factory(test_engine)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app that uses the test database."""
    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as async_client:
        yield async_client


@pytest.fixture
def transaction_service():
    """Transaction service that runs the operation it is given."""
    service = AsyncMock()

    async def run(operation):
        return await operation()

    service.execute_in_transaction = AsyncMock(side_effect=run)
    return service


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    # Mock methods
    mock_repo.find_id_by_id = AsyncMock(return_value=None)
    mock_repo.find_id_by_uuid = AsyncMock(return_value=None)
    mock_repo.create = AsyncMock()

    return mock_repo


@pytest.fixture
def mock_question_repository():
    """Mock question repository."""
    mock_repo = AsyncMock(spec=QuestionRepositoryInterface)

    # Mock methods
    mock_repo.get_all_ids = AsyncMock(return_value=[])
    mock_repo.next_display_order = AsyncMock(return_value=1)
    mock_repo.count_references = AsyncMock(return_value=0)

    return mock_repo


@pytest.fixture
def mock_job_question_repository():
    """Mock job-question binding repository."""
    mock_repo = AsyncMock(spec=JobQuestionRepositoryInterface)

    # Mock methods
    mock_repo.create_many = AsyncMock(side_effect=lambda job_id, ids: len(ids))
    mock_repo.get_question_ids = AsyncMock(return_value=[])
    mock_repo.get_for_job = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_answer_repository():
    """Mock answer repository."""
    mock_repo = AsyncMock(spec=AnswerRepositoryInterface)

    # Mock methods
    mock_repo.get_current = AsyncMock(return_value=None)

    return mock_repo


@pytest.fixture
def sample_customer_data():
    """Sample customer payload."""
    return {
        "name": "Harbor Logistics",
        "phone": "555-0100",
        "email": "ops@harbor.example",
        "address": "12 Dock Street",
        "contactName": "Sam Rivera",
    }
