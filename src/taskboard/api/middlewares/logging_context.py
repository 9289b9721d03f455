"""Logging context middleware for request correlation."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.taskboard.core.exceptions import internal_error_response
from src.taskboard.core.logging import bind_request_context, clear_request_context


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id, method and path to log context for all requests.

    Unhandled errors are turned into the generic 500 here, inside the
    correlation id and CORS middlewares, so the response still carries
    their headers.
    """
    clear_request_context()
    bind_request_context(correlation_id.get(), request.method, request.url.path)
    try:
        return await call_next(request)
    except Exception as exc:
        return internal_error_response(request, exc)
    finally:
        clear_request_context()
