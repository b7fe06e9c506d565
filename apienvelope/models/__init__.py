"""Public models for the response envelope."""

from apienvelope.models.envelope import (
    DEFAULT_SUCCESS_MESSAGE,
    ResponseEnvelope,
    error,
    success,
)

__all__ = [
    "DEFAULT_SUCCESS_MESSAGE",
    "ResponseEnvelope",
    "error",
    "success",
]
