"""Database engine and session configuration"""
import asyncio
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings, get_settings
from app.db.base import Base

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def create_engine_for(settings: Settings) -> AsyncEngine:
    """
    Build the async engine.

    PostgreSQL gets a bounded pool so a burst of requests queues for a
    connection instead of opening new ones. SQLite shares one connection.
    """
    if settings.database_url.startswith("sqlite"):
        return create_async_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
    )


def get_engine() -> AsyncEngine:
    """Get or lazily create the process engine"""
    global _engine
    if _engine is None:
        _engine = create_engine_for(get_settings())
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


async def connect_with_retry(engine: AsyncEngine, retry_delay: float) -> None:
    """
    Check the initial database connection.

    A failed first attempt is retried exactly once after retry_delay seconds;
    a second failure propagates. asyncpg raises a refused connection as a raw
    OSError rather than an OperationalError.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OperationalError, OSError) as e:
        logger.warning(f"Database connection failed, retrying in {retry_delay}s: {e}")
        await asyncio.sleep(retry_delay)
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    logger.info("Connected to database")


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables"""
    # registers every model on Base.metadata
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
