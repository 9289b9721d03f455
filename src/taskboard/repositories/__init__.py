"""Repository layer - data access abstraction."""

from src.taskboard.repositories.base import BaseRepository
from src.taskboard.repositories.project import ProjectRepository
from src.taskboard.repositories.task import TaskRepository
from src.taskboard.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
