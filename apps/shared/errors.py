"""
Secure Error Handling

Consistent error payloads and exception handlers shared by the site's apps.
Full error details are logged server-side, clients only see sanitized messages.
"""

import logging
import uuid
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.shared.headers import apply_security_headers

logger = logging.getLogger(__name__)

# Renders an HTML error page: (request, status_code, message, exc) -> Response
HtmlErrorRenderer = Callable[[Request, int, str, Exception], Response]


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "Render project page")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Short id to correlate the client message with the log line
    error_id = str(uuid.uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error,
    )

    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id


def error_response(message: str, category: str, status_code: int) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "category": category,
        },
        headers={"Cache-Control": "no-store"},
    )


def category_for_status(status_code: int) -> str:
    if status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        return "security"
    if status_code == status.HTTP_404_NOT_FOUND:
        return "not_found"
    if status_code >= 500:
        return "server_error"
    return "client_error"


def wants_json(request: Request) -> bool:
    """API routes answer errors with JSON, everything else gets an HTML page."""
    return request.url.path.startswith("/api")


def register_exception_handlers(
    app: FastAPI,
    html_renderer: Optional[HtmlErrorRenderer] = None,
    not_found_errors: tuple[type[Exception], ...] = (),
) -> None:
    """
    Install the shared exception handlers on an app.

    Usage:
        register_exception_handlers(app, render_error_page, (ProjectNotFound,))

    Exceptions listed in not_found_errors are answered with 404.
    """

    def respond(
        request: Request, exc: Exception, message: str, category: str, status_code: int
    ) -> Response:
        if html_renderer is not None and not wants_json(request):
            response = html_renderer(request, status_code, message, exc)
            response.headers["Cache-Control"] = "no-store"
        else:
            response = error_response(message, category, status_code)
        return apply_security_headers(response)

    async def not_found_handler(request: Request, exc: Exception):
        return respond(
            request,
            exc,
            message=str(exc),
            category="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )

    for exc_class in not_found_errors:
        app.add_exception_handler(exc_class, not_found_handler)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        message = (
            detail.get("message") if isinstance(detail, dict) else str(detail)
        ) or "Request failed."
        category = (
            detail.get("category") if isinstance(detail, dict) else None
        ) or category_for_status(exc.status_code)

        return respond(request, exc, message, category, exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        message, _ = log_and_sanitize_error(
            exc,
            context=f"{request.method} {request.url.path}",
            user_message="An unexpected server error occurred.",
        )
        return respond(
            request,
            exc,
            message=message,
            category="server_error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
