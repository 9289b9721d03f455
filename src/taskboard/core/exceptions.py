"""Service errors and exception handlers with request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Requested row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidReferenceError(ServiceError):
    """Payload points at a row that does not exist (e.g. a task's project)."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    """Write would violate a uniqueness constraint."""

    status_code = status.HTTP_409_CONFLICT


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into a single readable message.

    ``body -> name: Field required`` becomes ``name: Field required``.
    """
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        msg = error.get("msg", "Invalid value")
        if error.get("type") == "json_invalid":
            messages.append("Request body is not valid JSON")
        elif loc:
            messages.append(f"{'.'.join(loc)}: {msg}")
        else:
            messages.append(msg)
    return "; ".join(messages) or "Invalid request"


def _error_response(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": correlation_id.get(),
        },
    )


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception with its traceback and build the generic 500."""
    logger.exception(
        "Unhandled exception",
        exc_info=exc,
        request_id=correlation_id.get(),
        path=request.url.path,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Validation failures are client errors: 400, not FastAPI's default 422
        message = format_validation_errors(exc)
        logger.info("Request validation failed", path=request.url.path, detail=message)
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return internal_error_response(request, exc)
