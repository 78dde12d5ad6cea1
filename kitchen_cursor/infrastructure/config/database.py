"""
Database configuration.
"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from kitchen_cursor.infrastructure.config.settings import get_settings

settings = get_settings()

_engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
if settings.get_async_database_url().startswith("postgresql"):
    _engine_kwargs.update(pool_size=settings.db_pool_size, max_overflow=settings.db_max_overflow)

engine = create_async_engine(settings.get_async_database_url(), **_engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Dependency: one session per request."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models() -> None:
    """Create missing tables."""
    from kitchen_cursor.infrastructure.persistence.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
