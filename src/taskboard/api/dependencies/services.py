"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.api.dependencies.db import DBSession
from src.taskboard.api.dependencies.repositories import ProjectRepo, TaskRepo, UserRepo
from src.taskboard.services import ProjectService, TaskService, UserService


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, session)


def get_task_service(
    task_repo: TaskRepo,
    project_repo: ProjectRepo,
    session: DBSession,
) -> TaskService:
    """Get task service (needs projects to check references)."""
    return TaskService(task_repo, project_repo, session)


def get_user_service(user_repo: UserRepo, session: DBSession) -> UserService:
    """Get user service."""
    return UserService(user_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
