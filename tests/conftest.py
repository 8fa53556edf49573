"""
Pytest configuration and fixtures for Meeting Summarizer tests.

Provider calls are served by fakes from tests/fixtures/mock_providers.py and
the database is an in-memory SQLite (aiosqlite) shared across one test.
"""
import logging
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from summarizer.config import ProviderType, get_settings
from summarizer.core.coordinator import SummarizationCoordinator, get_coordinator
from summarizer.database import _enable_sqlite_foreign_keys, get_db_session
from summarizer.main import app
from summarizer.models import Base
from tests.fixtures.mock_providers import build_registry, fail

logger = logging.getLogger(__name__)

PROVIDER_ENV_VARS = (
    "GROQ_API_KEY",
    "OPENAI_API_KEY",
    "PROVIDER_ORDER",
    "GROQ_MODELS",
    "OPENAI_MODELS",
)


# ============================================
# Environment
# ============================================

@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    """Keep real credentials and overrides out of tests."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================
# Provider Fixtures
# ============================================

@pytest.fixture
def both_available():
    """Groq fails its first model; OpenAI succeeds."""
    return build_registry(
        {
            ProviderType.GROQ: {
                "llama3-8b-8192": fail(ProviderType.GROQ, "model decommissioned"),
                "llama3-70b-8192": "Groq summary",
            },
            ProviderType.OPENAI: {"gpt-3.5-turbo": "OpenAI summary"},
        }
    )


# ============================================
# Database Fixtures
# ============================================

@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for direct recorder tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ============================================
# API Fixtures
# ============================================

@pytest.fixture
def coordinator(both_available) -> SummarizationCoordinator:
    """Coordinator over the default fake providers."""
    registry, _ = both_available
    return SummarizationCoordinator(registry)


@pytest.fixture
async def async_client(
    session_factory, coordinator
) -> AsyncGenerator[AsyncClient, None]:
    """Async API client with database and coordinator overrides."""

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_coordinator] = lambda: coordinator

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============================================
# Pytest Configuration
# ============================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "fast: Fast unit tests (no external API calls)"
    )
    config.addinivalue_line(
        "markers", "integration: API tests against an in-memory database"
    )
