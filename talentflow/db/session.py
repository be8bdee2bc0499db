"""
Database session and engine configuration.

This file sets up the async database connection using SQLAlchemy + aiosqlite.
Nothing here is created at import time: the application factory builds one
engine at startup and hands the session factory to the entity store.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from talentflow.core.config import Settings
from talentflow.db.base import Base
from talentflow.models import IdSequence


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async database engine from settings."""
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,  # When DEBUG=True, prints SQL queries to console
        future=True,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keeps data accessible after commit
    )


async def init_db(engine: AsyncEngine, collections: list[str]) -> None:
    """
    Create all tables and make sure every collection has an id sequence row.

    Safe to call on an existing database; existing rows are left alone.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = build_session_maker(engine)
    async with session_maker() as session:
        result = await session.execute(select(IdSequence.collection))
        existing = set(result.scalars().all())
        for name in collections:
            if name not in existing:
                session.add(IdSequence(collection=name, last_id=0))
        await session.commit()
