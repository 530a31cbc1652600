"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base for all ORM models
2. Database: engine + session factory built from an explicit Settings object
3. create_db_and_tables(): bootstrap a fresh database

Write serialization:
- PostgreSQL: repositories lock the rows they mutate (SELECT ... FOR UPDATE)
- SQLite: has no row locks, so every transaction starts with BEGIN IMMEDIATE and
  takes the database write lock up front; concurrent writers queue behind it for
  up to SQLITE_BUSY_TIMEOUT seconds
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Engine factory
# =============================================================================


def _create_engine(config: Settings) -> AsyncEngine:
    if config.is_sqlite:
        engine = create_async_engine(
            config.DATABASE_URL,
            echo=False,
            connect_args={'timeout': config.SQLITE_BUSY_TIMEOUT},
        )
        _install_sqlite_locking(engine)
        return engine

    return create_async_engine(
        config.DATABASE_URL,
        echo=False,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_POOL_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_recycle=config.DB_POOL_RECYCLE,
        pool_pre_ping=config.DB_POOL_PRE_PING,
    )


def _install_sqlite_locking(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, 'connect')
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Stop the driver from emitting its own deferred BEGIN
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """Owns the engine and session factory for one configured database."""

    def __init__(self, *, config: Settings) -> None:
        self._engine = _create_engine(config)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions (rolls back on exception)"""
        async with self._session_maker() as session:
            try:
                yield session
            except Exception:
                Logger.base.warning('Session rollback because of exception')
                await session.rollback()
                raise

    async def check_connection(self) -> None:
        """Fail fast if the database cannot be reached"""
        async with self._engine.connect() as conn:
            await conn.execute(text('SELECT 1'))

    async def dispose(self) -> None:
        await self._engine.dispose()


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables(database: Database) -> None:
    """Create database tables if they don't exist"""
    # Models must be imported so they register with Base.metadata
    import src.service.parking.driven_adapter.model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('Tables ensured')


async def drop_all_tables(database: Database) -> None:
    import src.service.parking.driven_adapter.model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    Logger.base.info('Tables dropped')
