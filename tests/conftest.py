"""
Shared pytest fixtures for the device inventory tests.
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from device_inventory.db import models  # noqa: F401
from device_inventory.infrastructure.database.base import Base
from device_inventory.interfaces.http.deps import get_db_session


@pytest.fixture
def repository():
    """Repository double whose save() echoes the record it receives."""
    repo = AsyncMock()
    repo.save.side_effect = lambda device: device
    return repo


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def client(tmp_path):
    """TestClient backed by a throwaway SQLite file per test."""
    from device_inventory.main import app

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'devices.db'}", poolclass=NullPool)

    async def _create_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create_schema())
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def _session_override():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session_override
    try:
        # tables come from the fixture engine, not the application lifespan
        with patch("device_inventory.main.init_db", new=AsyncMock()), TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_db_session, None)
        asyncio.run(engine.dispose())
