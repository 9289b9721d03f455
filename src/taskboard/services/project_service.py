"""Project management service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Project
from src.taskboard.repositories import ProjectRepository
from src.taskboard.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project CRUD - business logic only."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_projects(self) -> list[Project]:
        """List all projects, newest first."""
        return await self.project_repo.list_all()

    async def get_project(self, project_id: int) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        """Insert a project; id and created_at are assigned on insert."""
        project = Project(name=data.name, description=data.description)
        self.project_repo.add(project)

        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=project.id)
        return project

    async def update_project(self, project_id: int, data: ProjectUpdate) -> Project:
        """Update only the fields present in the request.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.get_project(project_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(project, field, value)

        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project updated", project_id=project_id)
        return project

    async def delete_project(self, project_id: int) -> None:
        """Delete a project. Its tasks go with it (ON DELETE CASCADE).

        Raises:
            NotFoundError: If the project does not exist
        """
        try:
            deleted = await self.project_repo.delete_by_id(project_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if not deleted:
            raise NotFoundError(f"Project {project_id} not found")

        logger.info("Project deleted", project_id=project_id)
