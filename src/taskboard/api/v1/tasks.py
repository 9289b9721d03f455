"""Task endpoints."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import TaskId, TaskServiceDep
from src.taskboard.schemas import MessageResponse, TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List tasks",
    description="List all tasks, soonest due date first.",
)
async def list_tasks(service: TaskServiceDep) -> list[TaskRead]:
    """List all tasks."""
    tasks = await service.list_tasks()
    return [TaskRead.model_validate(t) for t in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={
        201: {"description": "Task created"},
        400: {"description": "Invalid body or unknown project"},
    },
)
async def create_task(request: TaskCreate, service: TaskServiceDep) -> TaskRead:
    """Create a task. The referenced project must exist."""
    task = await service.create_task(request)
    return TaskRead.model_validate(task)


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get task",
    responses={
        200: {"description": "Task details"},
        404: {"description": "Task not found"},
    },
)
async def get_task(task_id: TaskId, service: TaskServiceDep) -> TaskRead:
    """Get a task by ID."""
    task = await service.get_task(task_id)
    return TaskRead.model_validate(task)


@router.api_route(
    "/{task_id}",
    methods=["PUT", "PATCH"],
    response_model=TaskRead,
    summary="Update task",
    description="Update the fields present in the body; omitted fields are kept.",
    responses={
        200: {"description": "Task updated"},
        400: {"description": "Invalid body or unknown project"},
        404: {"description": "Task not found"},
    },
)
async def update_task(task_id: TaskId, request: TaskUpdate, service: TaskServiceDep) -> TaskRead:
    """Update an existing task."""
    task = await service.update_task(task_id, request)
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete task",
    responses={
        200: {"description": "Task deleted"},
        404: {"description": "Task not found"},
    },
)
async def delete_task(task_id: TaskId, service: TaskServiceDep) -> MessageResponse:
    """Delete a task."""
    await service.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully")
