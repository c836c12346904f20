"""Database connection utilities."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.config import get_settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class DatabaseManager:
    """Database manager handling engine and session factory lifecycle.

    The engine is created once per process; repeated initialization returns
    the existing engine.
    """

    def __init__(self) -> None:
        """Initialize manager with no engine."""
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def init_engine(self, url: Optional[str] = None) -> AsyncEngine:
        """Create the engine, or return the existing one.

        Args:
            url: Database URL. Defaults to the configured URL.

        Returns:
            Async engine instance.
        """
        if self._engine is not None:
            logger.debug("Database engine already initialized")
            return self._engine

        settings = get_settings()
        self._engine = create_async_engine(
            url or settings.database_url,
            echo=settings.debug,
            pool_pre_ping=True,  # Verify connections before using
        )
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )
        logger.info("Database engine initialized")
        return self._engine

    @property
    def engine(self) -> AsyncEngine:
        """Get engine, initializing if needed."""
        return self.init_engine()

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get session factory, initializing the engine if needed."""
        if self._session_factory is None:
            self.init_engine()
        return self._session_factory

    async def verify_connection(self) -> bool:
        """Verify database connection. Raises exception if connection fails."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def create_tables(self) -> None:
        """Create all tables from model metadata (used for SQLite setups)."""
        # Register models with Base.metadata
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Dispose engine and reset state."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


# Global database manager instance
db_manager = DatabaseManager()


async def run_migrations() -> None:
    """Run database migrations using Alembic."""
    from alembic import command
    from alembic.config import Config

    # alembic.ini lives in the project root
    project_root = Path(__file__).resolve().parents[2]
    alembic_ini_path = project_root / "alembic.ini"

    if not alembic_ini_path.exists():
        raise FileNotFoundError(
            f"Alembic configuration file not found at {alembic_ini_path}"
        )

    alembic_cfg = Config(str(alembic_ini_path))
    alembic_cfg.set_main_option("sqlalchemy.url", get_settings().database_url)
    # Keep the application's logging configuration
    alembic_cfg.attributes["configure_logger"] = False

    # env.py drives the async engine via asyncio.run, so keep it off the loop
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


async def init_db() -> bool:
    """Initialize database connection and run migrations.

    Returns:
        True if the database is reachable, False otherwise. Failures are
        logged, never raised.
    """
    settings = get_settings()
    try:
        db_manager.init_engine()
        if settings.run_migrations:
            await run_migrations()
        await db_manager.verify_connection()
    except Exception as e:
        logger.error(
            "Failed to initialize database",
            extra={"error": str(e)},
            exc_info=True,
        )
        return False
    logger.info("Database initialized successfully")
    return True


async def close_db() -> None:
    """Close database connections."""
    await db_manager.close()
