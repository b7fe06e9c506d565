"""Middleware package: error hierarchy, handlers and request ID."""

from apienvelope.middleware.error_handler import (
    ApiError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    register_error_handlers,
)
from apienvelope.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "PermissionDeniedError",
    "RequestIdMiddleware",
    "ValidationError",
    "register_error_handlers",
]
