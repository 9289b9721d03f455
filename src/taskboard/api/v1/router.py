from fastapi import APIRouter

from src.taskboard.api.v1 import projects, tasks, users
from src.taskboard.core.config import get_settings


def build_api_router() -> APIRouter:
    """Mount every resource router under the configured API prefix."""
    api_router = APIRouter(prefix=get_settings().api_prefix)
    api_router.include_router(projects.router)
    api_router.include_router(tasks.router)
    api_router.include_router(users.router)
    return api_router
