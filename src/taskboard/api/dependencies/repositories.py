"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.api.dependencies.db import DBSession
from src.taskboard.repositories import ProjectRepository, TaskRepository, UserRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    """Get project repository."""
    return ProjectRepository(session)


def get_task_repository(session: DBSession) -> TaskRepository:
    """Get task repository."""
    return TaskRepository(session)


def get_user_repository(session: DBSession) -> UserRepository:
    """Get user repository."""
    return UserRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
TaskRepo = Annotated[TaskRepository, Depends(get_task_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
