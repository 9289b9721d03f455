"""Task model."""

from datetime import date

from sqlmodel import Field, SQLModel

from src.taskboard.models.enums import TaskStatus


class Task(SQLModel, table=True):
    """Task entity belonging to a project.

    The foreign key cascades on delete, so removing a project removes its
    tasks in the same statement.
    """

    __tablename__ = "tasks"

    id: int | None = Field(default=None, primary_key=True)
    description: str
    status: str = Field(default=TaskStatus.PENDING.value, max_length=20)
    due_date: date | None = Field(default=None, index=True)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
