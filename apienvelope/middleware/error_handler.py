"""Error hierarchy and FastAPI exception handlers.

Application errors extend ApiError. The exception handlers catch these errors
(plus FastAPI's RequestValidationError, Starlette's HTTPException and unhandled
exceptions) and return an error envelope: { success: false, message, timestamp }.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apienvelope.models.envelope import error
from apienvelope.responses import envelope_response

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ApiError(Exception):
    """Base error for all application errors rendered as envelopes."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ValidationError(ApiError):
    """Payload failed business validation."""

    status_code = 422
    message = "Validation error"


class AuthenticationError(ApiError):
    """Missing or invalid credentials."""

    status_code = 401
    message = "Authentication required"


class PermissionDeniedError(ApiError):
    status_code = 403
    message = "Permission denied"


class NotFoundError(ApiError):
    """Requested resource does not exist."""

    status_code = 404
    message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    message = "Resource conflict"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _log_context(request: Request, status_code: int, exc: Exception) -> dict:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "status_code": status_code,
        "path": request.url.path,
        "error_type": type(exc).__name__,
    }


def _request_id_headers(request: Request) -> dict[str, str] | None:
    # ServerErrorMiddleware runs outside RequestIdMiddleware, so 500s echo the ID here.
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        return None
    header = getattr(request.app.state, "request_id_header", "X-Request-ID")
    return {header: request_id}


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Handle ApiError subclasses."""
    extra = _log_context(request, exc.status_code, exc)
    if exc.details and getattr(request.app.state, "log_error_details", True):
        extra["details"] = exc.details
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(level, "API error: %s", exc.message, extra=extra)
    return envelope_response(error(exc.message), status_code=exc.status_code)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    message = "Validation error"
    if field_errors:
        message = f"{message}: {'; '.join(field_errors)}"
    logger.warning(message, extra=_log_context(request, 422, exc))
    return envelope_response(error(message), status_code=422)


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by routes or by Starlette routing (404, 405)."""
    logger.warning(
        "HTTP error: %s", exc.detail, extra=_log_context(request, exc.status_code, exc)
    )
    return envelope_response(
        error(str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions. Logs the traceback, returns a generic 500."""
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=exc,
        extra=_log_context(request, 500, exc),
    )
    return envelope_response(
        error(ApiError.message),
        status_code=500,
        headers=_request_id_headers(request),
    )


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
