"""FastAPI response helpers for envelopes."""

from __future__ import annotations

from collections.abc import Mapping

from fastapi.responses import JSONResponse

from apienvelope.models.envelope import ResponseEnvelope


def envelope_response(
    envelope: ResponseEnvelope,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Render an envelope as a JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json"),
        headers=headers,
    )
