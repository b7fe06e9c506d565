"""Standard response envelope for API endpoints."""

from apienvelope.integration import install
from apienvelope.models.envelope import (
    DEFAULT_SUCCESS_MESSAGE,
    ResponseEnvelope,
    error,
    success,
)
from apienvelope.responses import envelope_response

__all__ = [
    "DEFAULT_SUCCESS_MESSAGE",
    "ResponseEnvelope",
    "envelope_response",
    "error",
    "install",
    "success",
]
