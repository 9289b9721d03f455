from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.taskboard.api.middlewares import setup_middlewares
from src.taskboard.api.v1.router import build_api_router
from src.taskboard.core.config import get_settings
from src.taskboard.core.db import create_tables, dispose_engine, wait_for_database
from src.taskboard.core.exceptions import setup_exception_handlers
from src.taskboard.core.health import setup_health_endpoint, setup_metrics
from src.taskboard.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    await wait_for_database()
    await create_tables()
    logger.info("Server ready", api_prefix=settings.api_prefix)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Project CRUD"},
    {"name": "tasks", "description": "Task CRUD; every task belongs to a project"},
    {"name": "users", "description": "Standalone user records"},
    {"name": "health", "description": "Liveness and database checks"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Projects, tasks and users over a relational database",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(build_api_router())

    setup_health_endpoint(app)
    setup_metrics(app)

    return app


app = create_app()
