"""Task management service."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import InvalidReferenceError, NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Task
from src.taskboard.repositories import ProjectRepository, TaskRepository
from src.taskboard.schemas.task import TaskCreate, TaskUpdate

logger = get_logger(__name__)


class TaskService:
    """Task CRUD with project reference checks."""

    def __init__(
        self,
        task_repo: TaskRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.task_repo = task_repo
        self.project_repo = project_repo
        self.session = session

    async def _ensure_project_exists(self, project_id: int) -> None:
        if not await self.project_repo.exists_by_id(project_id):
            logger.info("Rejected task for unknown project", project_id=project_id)
            raise InvalidReferenceError(f"Project {project_id} does not exist")

    async def _commit(self, task: Task) -> None:
        project_id = task.project_id
        try:
            await self.session.commit()
            await self.session.refresh(task)
        except IntegrityError as e:
            # Project deleted between the existence check and the write
            await self.session.rollback()
            raise InvalidReferenceError(f"Project {project_id} does not exist") from e
        except Exception:
            await self.session.rollback()
            raise

    async def list_tasks(self) -> list[Task]:
        """List all tasks, soonest deadline first."""
        return await self.task_repo.list_all()

    async def list_tasks_for_project(self, project_id: int) -> list[Task]:
        """List the tasks of one project.

        Raises:
            NotFoundError: If the project does not exist
        """
        if not await self.project_repo.exists_by_id(project_id):
            raise NotFoundError(f"Project {project_id} not found")
        return await self.task_repo.list_by_project(project_id)

    async def get_task(self, task_id: int) -> Task:
        """Get a task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError(f"Task {task_id} not found")
        return task

    async def create_task(self, data: TaskCreate) -> Task:
        """Create a task under an existing project.

        Raises:
            InvalidReferenceError: If project_id does not reference a project
        """
        await self._ensure_project_exists(data.project_id)

        task = Task(
            description=data.description,
            status=data.status.value,
            due_date=data.due_date,
            project_id=data.project_id,
        )
        self.task_repo.add(task)
        await self._commit(task)

        logger.info("Task created", task_id=task.id, project_id=task.project_id)
        return task

    async def update_task(self, task_id: int, data: TaskUpdate) -> Task:
        """Update only the fields present in the request.

        Raises:
            NotFoundError: If the task does not exist
            InvalidReferenceError: If a new project_id does not reference a project
        """
        task = await self.get_task(task_id)
        update_data = data.model_dump(exclude_unset=True)

        if "project_id" in update_data and update_data["project_id"] != task.project_id:
            await self._ensure_project_exists(update_data["project_id"])
        if "status" in update_data:
            update_data["status"] = update_data["status"].value

        for field, value in update_data.items():
            setattr(task, field, value)

        await self._commit(task)

        logger.info("Task updated", task_id=task_id, fields=sorted(update_data))
        return task

    async def delete_task(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            NotFoundError: If the task does not exist
        """
        try:
            deleted = await self.task_repo.delete_by_id(task_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if not deleted:
            raise NotFoundError(f"Task {task_id} not found")

        logger.info("Task deleted", task_id=task_id)
