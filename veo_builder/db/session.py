"""Database engine and session management."""

from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def create_engine(database_url: str) -> AsyncEngine:
    """Create an async engine, making sure a SQLite file has a directory to live in."""

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(database_url, echo=False)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables if they do not exist."""

    from veo_builder.db import models  # noqa: WPS433 — import inside function to avoid cycles

    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a managed asynchronous SQLAlchemy session bound to the running app."""

    async with request.app.state.session_factory() as session:
        yield session
