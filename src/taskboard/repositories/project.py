"""Repository for Project entity."""

from sqlalchemy import exists, select

from src.taskboard.models import Project
from src.taskboard.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project
    # Newest first
    default_order = (Project.created_at.desc(), Project.id.desc())  # type: ignore[union-attr]

    async def exists_by_id(self, project_id: int) -> bool:
        """Check whether a project row exists (single SELECT EXISTS)."""
        result = await self.session.execute(select(exists().where(Project.id == project_id)))
        return bool(result.scalar())
