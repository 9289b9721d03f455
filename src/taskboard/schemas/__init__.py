"""Schema exports."""

from src.taskboard.schemas.common import MAX_ROW_ID, MessageResponse
from src.taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.taskboard.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.taskboard.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    # Common
    "MAX_ROW_ID",
    "MessageResponse",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    # Task
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
