"""
Blog Management API — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_repository: AsyncMock of BlogPostRepositoryBase (service tests)
    ├── sample_post:     A BlogPost entity with fixed timestamps
    ├── db_session:      AsyncSession on a throwaway SQLite file (repository tests)
    └── test_client:     HTTPX AsyncClient against the app on a fresh schema
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

# Override settings BEFORE any app import: app.config builds its singleton
# at import time and app.database creates the engine from it
_TEST_DB_DIR = tempfile.mkdtemp(prefix="blog_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["API_PREFIX"] = "/api"
os.environ["DB_AUTO_MIGRATE"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.models.blog_post import BlogPost
from app.repositories.base import BlogPostRepositoryBase


@pytest.fixture
def mock_repository():
    """
    Provides a mock repository honouring the BlogPostRepositoryBase contract.

    Usage:
        async def test_get(mock_repository, sample_post):
            mock_repository.get_by_id.return_value = sample_post
            result = await BlogPostService(mock_repository).get_blog_by_id(sample_post.id)
    """
    return AsyncMock(spec=BlogPostRepositoryBase)


@pytest.fixture
def sample_post():
    """An active post created an hour ago and last updated 30 minutes ago."""
    created = datetime.now(timezone.utc) - timedelta(hours=1)
    return BlogPost(
        id="550e8400-e29b-41d4-a716-446655440000",
        title="My First Blog Post",
        description="This is a brief description of my blog post",
        body="This is the main content of my blog post...",
        created_at=created,
        updated_at=created + timedelta(minutes=30),
    )


@pytest_asyncio.fixture
async def db_session(tmp_path):
    """
    Provides an AsyncSession bound to a fresh SQLite database file.

    The session is not committed by the fixture; tests call commit()
    themselves when they need to read back through a second session.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'repository.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP client talking to the FastAPI app in-process.

    The app's engine points at the SQLite file configured above; tables are
    created before and dropped after each test. The pool is disposed at the
    end so no connection outlives the test's event loop.
    """
    from app.database import engine
    from app.main import app

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
