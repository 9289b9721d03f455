"""User management endpoints."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import UserId, UserServiceDep
from src.taskboard.schemas import MessageResponse, UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead], summary="List users")
async def list_users(service: UserServiceDep) -> list[UserRead]:
    users = await service.list_users()
    return [UserRead.model_validate(u) for u in users]


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Name or email missing or invalid"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(request: UserCreate, service: UserServiceDep) -> UserRead:
    user = await service.create_user(request)
    return UserRead.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: UserId, service: UserServiceDep) -> UserRead:
    user = await service.get_user(user_id)
    return UserRead.model_validate(user)


@router.api_route(
    "/{user_id}",
    methods=["PUT", "PATCH"],
    response_model=UserRead,
    summary="Update user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(user_id: UserId, request: UserUpdate, service: UserServiceDep) -> UserRead:
    user = await service.update_user(user_id, request)
    return UserRead.model_validate(user)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete user",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: UserId, service: UserServiceDep) -> MessageResponse:
    await service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
