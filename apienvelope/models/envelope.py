"""Generic API response envelope model.

Every API response is wrapped in this envelope for consistency:
{ success: bool, message: str | None, data: T, timestamp: int }

``data`` is left out of the serialized form when it is ``None``. The timestamp
is wall-clock milliseconds since the Unix epoch, stamped at construction.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar, overload

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "Success"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ResponseEnvelope(BaseModel, Generic[T]):
    """JSON envelope for API responses.

    Fields are plain attributes and may be reassigned freely; nothing ties
    ``data`` to ``success``.
    """

    success: bool = False
    message: str | None = None
    data: T | None = None
    timestamp: int = Field(default_factory=_now_ms)

    def __init__(
        self,
        success: bool = False,
        message: str | None = None,
        data: T | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(success=success, message=message, data=data, **kwargs)

    @property
    def created_at(self) -> datetime:
        """Timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)

    @model_serializer(mode="wrap")
    def serialize_envelope(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        if payload.get("data") is None:
            payload.pop("data", None)
        return payload


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@overload
def success(data: T, /) -> ResponseEnvelope[T]: ...


@overload
def success(message: str, data: T, /) -> ResponseEnvelope[T]: ...


def success(*args: Any) -> ResponseEnvelope[Any]:
    """Build a success envelope.

    ``success(data)`` uses the default "Success" message;
    ``success(message, data)`` sets both.
    """
    if len(args) == 1:
        return ResponseEnvelope(True, DEFAULT_SUCCESS_MESSAGE, args[0])
    if len(args) == 2:
        return ResponseEnvelope(True, args[0], args[1])
    raise TypeError(
        f"success() takes 1 or 2 positional arguments but {len(args)} were given"
    )


def error(message: str) -> ResponseEnvelope[Any]:
    """Build an error envelope carrying only a message."""
    return ResponseEnvelope(False, message)
