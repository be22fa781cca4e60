# =============================================================================
# Payload API - Database Service
# =============================================================================
"""
Database connection and unit-of-work management.

Wraps SQLAlchemy's async engine and session factory. Each request acquires
one session (its unit of work), stages rows with ``add()`` and writes them
with ``commit()``; the session is released on every exit path.
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

import structlog
from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import get_settings
from ..models import Base


# Configure structured logger
logger = structlog.get_logger(__name__)


class Database:
    """
    Async engine and session factory for the payload store.
    
    Usage:
        db = Database("sqlite+aiosqlite:///./payloads.db")
        async with db.unit_of_work() as session:
            session.add(row)
            await session.commit()
    
    Attributes:
        url: Connection string the engine was built from
        engine: SQLAlchemy async engine (owns the connection pool)
    """
    
    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
    ) -> None:
        """
        Initialize the engine and session factory.
        
        Args:
            database_url: Async connection URL (e.g. postgresql+asyncpg://...)
            echo: If True, log all SQL statements
            pool_size: Connections kept in the pool (non-SQLite only)
        """
        self.url = database_url
        
        # SQLite pools reject sizing arguments
        pool_options = (
            {}
            if database_url.startswith("sqlite")
            else {"pool_size": pool_size, "pool_pre_ping": True}
        )
        
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            **pool_options,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Response mapping reads rows after commit
        )
        
        logger.info(
            "database_initialized",
            dialect=self.engine.dialect.name,
            echo=echo,
        )
    
    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a session scoped to one logical set of changes.
        
        The caller commits explicitly. An exception escaping the block
        rolls back; the session is always closed.
        
        Yields:
            AsyncSession: Session for staging and committing rows
        """
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
    
    async def create_all(self) -> None:
        """
        Create all tables defined in the models.
        
        Safe to call repeatedly; existing tables are left alone.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_schema_ready", tables=sorted(Base.metadata.tables))
    
    async def drop_all(self) -> None:
        """Drop all tables defined in the models. Deletes all data."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    
    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("database_disposed")


@lru_cache
def get_database() -> Database:
    """
    Get cached database instance.
    
    Uses LRU cache to share one engine (and its pool) across
    all requests.
    
    Returns:
        Database: Configured database instance
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
    )


async def get_session(
    database: Database = Depends(get_database),
) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one unit of work per request."""
    async with database.unit_of_work() as session:
        yield session
