"""Database engine management."""

import asyncio
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)

_engine: AsyncEngine | None = None


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        if settings.is_sqlite:
            # SQLite pools don't take size/overflow arguments
            _engine = create_async_engine(settings.database_url, echo=settings.database_echo)
            event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            _engine = create_async_engine(
                settings.database_url,
                echo=settings.database_echo,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=True,
            )
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


async def wait_for_database(
    engine: AsyncEngine | None = None,
    attempts: int | None = None,
    interval: float | None = None,
) -> None:
    """Block until the database answers ``SELECT 1``.

    Args:
        engine: Optional engine override for testing.
        attempts: Number of probes before giving up (defaults to settings).
        interval: Seconds to sleep between probes (defaults to settings).

    Raises:
        The last connection error once every attempt has failed.
    """
    settings = get_settings()
    if engine is None:
        engine = get_engine()
    if attempts is None:
        attempts = settings.database_connect_attempts
    if interval is None:
        interval = settings.database_connect_interval

    for attempt in range(1, attempts + 1):
        try:
            async with engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            return
        except Exception as e:
            if attempt == attempts:
                logger.error(
                    "Database unreachable, giving up",
                    attempts=attempts,
                    error=str(e),
                )
                raise
            logger.warning(
                "Waiting for database",
                attempt=attempt,
                max_attempts=attempts,
                error=str(e),
            )
            await asyncio.sleep(interval)
