"""
Color Picker API - Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock async session (service unit tests, no DB)
    ├── db_engine: In-memory SQLite engine with the schema created
    ├── db_session_factory: Session factory over db_engine, seeded with
    │   "Super dope project" (id 1) and "super dope palette"
    └── test_client: HTTPX AsyncClient wired to the app, using db_session_factory
"""

import os

# Settings are read on first import of colorpicker.config, so the test
# environment has to be in place before any app import below.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from colorpicker.database import Base, get_db_session
from colorpicker.models.palette import Palette
from colorpicker.models.project import Project


SEED_PALETTE = {
    "palette_name": "super dope palette",
    "project_id": 1,
    "color_1": "#000000",
    "color_2": "#FFFFFF",
    "color_3": "#CCCCCC",
    "color_4": "#1f1f1f",
    "color_5": "#1d1d1d",
}


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        async def test_find(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = project
            result = await project_service.find_by_key(mock_db_session, "name")
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
def palette_payload():
    """A complete, valid POST /api/v1/palettes body."""
    return {
        "palette_name": "test palette",
        "project_id": 1,
        "color_1": "#000000",
        "color_2": "#FFFFFF",
        "color_3": "#CCCCCC",
        "color_4": "#1F1F1F",
        "color_5": "#1E1E1E",
    }


# ══════════════════════════════════════════════════════════════════════════
# Database-backed Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with both tables created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session_factory(db_engine):
    """Session factory over a freshly seeded database."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        session.add(Project(name="Super dope project"))
        await session.flush()
        session.add(Project(name="Another project"))
        session.add(Palette(**SEED_PALETTE))
        await session.commit()
    return factory


@pytest_asyncio.fixture
async def test_client(db_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    The app's session dependency is overridden to use the seeded test
    database, with the same commit/rollback behaviour as production.
    """
    from colorpicker.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
