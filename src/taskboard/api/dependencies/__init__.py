"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Database
from src.taskboard.api.dependencies.db import DBSession, get_db_session

# Path parameters
from src.taskboard.api.dependencies.params import ProjectId, TaskId, UserId

# Repositories
from src.taskboard.api.dependencies.repositories import (
    ProjectRepo,
    TaskRepo,
    UserRepo,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)

# Services
from src.taskboard.api.dependencies.services import (
    ProjectServiceDep,
    TaskServiceDep,
    UserServiceDep,
    get_project_service,
    get_task_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Path parameters
    "ProjectId",
    "TaskId",
    "UserId",
    # Repositories
    "ProjectRepo",
    "TaskRepo",
    "UserRepo",
    "get_project_repository",
    "get_task_repository",
    "get_user_repository",
    # Services
    "ProjectServiceDep",
    "TaskServiceDep",
    "UserServiceDep",
    "get_project_service",
    "get_task_service",
    "get_user_service",
]
