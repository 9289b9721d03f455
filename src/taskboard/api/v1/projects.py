"""Project endpoints."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import ProjectId, ProjectServiceDep, TaskServiceDep
from src.taskboard.schemas import MessageResponse, ProjectCreate, ProjectRead, ProjectUpdate
from src.taskboard.schemas.task import TaskRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List all projects, newest first.",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    """List all projects."""
    projects = await service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Name missing or empty"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    """Create a new project."""
    project = await service.create_project(request)
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: ProjectId, service: ProjectServiceDep) -> ProjectRead:
    """Get a project by ID."""
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.api_route(
    "/{project_id}",
    methods=["PUT", "PATCH"],
    response_model=ProjectRead,
    summary="Update project",
    description="Update the fields present in the body; omitted fields are kept.",
    responses={
        200: {"description": "Project updated"},
        400: {"description": "Invalid body"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: ProjectId,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Update an existing project."""
    project = await service.update_project(project_id, request)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete project",
    description="Delete a project and, by cascade, all of its tasks.",
    responses={
        200: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: ProjectId, service: ProjectServiceDep) -> MessageResponse:
    """Delete a project."""
    await service.delete_project(project_id)
    return MessageResponse(message="Project deleted successfully")


@router.get(
    "/{project_id}/tasks",
    response_model=list[TaskRead],
    summary="List project tasks",
    description="List the tasks of one project, soonest due date first.",
    responses={
        200: {"description": "Tasks of the project"},
        404: {"description": "Project not found"},
    },
)
async def list_project_tasks(project_id: ProjectId, service: TaskServiceDep) -> list[TaskRead]:
    """List tasks belonging to a project."""
    tasks = await service.list_tasks_for_project(project_id)
    return [TaskRead.model_validate(t) for t in tasks]
