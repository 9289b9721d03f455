"""Task schemas for API request/response."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from src.taskboard.models.enums import TaskStatus
from src.taskboard.schemas.common import MAX_ROW_ID


def _require_description(v: str | None) -> str:
    if v is None:
        raise ValueError("Task description is required")
    v = v.strip()
    if not v:
        raise ValueError("Task description is required")
    return v


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    description: str
    status: TaskStatus = TaskStatus.PENDING
    due_date: date
    project_id: int = Field(gt=0, le=MAX_ROW_ID)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _require_description(v)


class TaskUpdate(BaseModel):
    """Schema for updating a task. Omitted fields are left unchanged.

    Explicit nulls are rejected for every field: a task always keeps a
    description, a status, a due date and a project.
    """

    description: str | None = None
    status: TaskStatus | None = None
    due_date: date | None = None
    project_id: int | None = Field(default=None, gt=0, le=MAX_ROW_ID)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str:
        return _require_description(v)

    @field_validator("status", "due_date", "project_id")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class TaskRead(BaseModel):
    """Schema for reading a task."""

    id: int
    description: str
    status: TaskStatus
    due_date: date | None
    project_id: int

    model_config = {"from_attributes": True}
