"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite file so tests never share rows. The tables
are created the same way the application lifespan creates them.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.taskboard.core import db
from src.taskboard.core.config import get_settings
from src.taskboard.main import app
from src.taskboard.models import Project, Task
from tests.factories import ProjectFactory, TaskFactory


@pytest.fixture
async def engine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Point the app at a fresh SQLite database and create the tables."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}")
    get_settings.cache_clear()
    await db.dispose_engine()

    test_engine = db.get_engine()
    await db.create_tables(test_engine)

    yield test_engine

    await db.dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting rows.

    Tests must call `await session.commit()` to make rows visible to the API.
    """
    async with db.get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def project(db_session: AsyncSession) -> Project:
    """A persisted project with no tasks."""
    project = ProjectFactory.build()
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest.fixture
async def project_with_tasks(
    db_session: AsyncSession, project: Project
) -> tuple[Project, list[Task]]:
    """A persisted project owning two tasks."""
    tasks = [TaskFactory.build(project_id=project.id), TaskFactory.completed(project_id=project.id)]
    db_session.add_all(tasks)
    await db_session.commit()
    for task in tasks:
        await db_session.refresh(task)
    return project, tasks
