"""Repository for Task entity."""

from sqlmodel import select

from src.taskboard.models import Task
from src.taskboard.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity."""

    model = Task
    # Soonest deadline first
    default_order = (Task.due_date.asc(), Task.id.asc())  # type: ignore[union-attr]

    async def list_by_project(self, project_id: int) -> list[Task]:
        """List tasks of a project, soonest deadline first."""
        query = select(Task).where(Task.project_id == project_id).order_by(*self.default_order)
        result = await self.session.execute(query)
        return list(result.scalars().all())
