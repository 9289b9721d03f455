"""Table bootstrap: create tables that do not exist yet.

There are no versioned migrations; ``create_all`` only issues
``CREATE TABLE`` for missing tables and leaves existing ones untouched.
"""

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from src.taskboard.core.db.engine import get_engine
from src.taskboard.core.logging import get_logger

# Register tables on SQLModel.metadata
from src.taskboard.models import Project, Task, User  # noqa: F401

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create the projects, tasks and users tables if missing."""
    if engine is None:
        engine = get_engine()

    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)

    logger.info("Tables created/verified", tables=sorted(SQLModel.metadata.tables))


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Drop every table. Used by tests to reset state."""
    if engine is None:
        engine = get_engine()

    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.drop_all)
