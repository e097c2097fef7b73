"""Test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import cluster_profiles.models  # noqa: F401
from cluster_profiles.config import Settings
from tests.samples import AMAZON_IMAGES_YAML, DEFAULTS_YAML, write_defaults


@pytest.fixture
def defaults_dir(tmp_path: Path) -> Path:
    """Directory holding both defaults files."""
    write_defaults(tmp_path, DEFAULTS_YAML, AMAZON_IMAGES_YAML)
    return tmp_path


@pytest.fixture
def test_settings(defaults_dir: Path) -> Settings:
    """Get test settings with in-memory SQLite."""
    return Settings(
        database={"url": "sqlite+aiosqlite:///:memory:"},
        defaults={"dir": str(defaults_dir)},
    )


@pytest.fixture
async def db_session(test_settings: Settings):
    """Create test database session."""
    engine = create_async_engine(
        test_settings.database.url,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_factory = sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_factory() as session:
        yield session

    await engine.dispose()
