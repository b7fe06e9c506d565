"""Pydantic Settings for the envelope integration.

All environment variables use the ENVELOPE_ prefix.
Example: ENVELOPE_LOG_LEVEL=DEBUG, ENVELOPE_JSON_LOGS=false
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class EnvelopeSettings(BaseSettings):
    """Integration configuration validated from environment variables."""

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True
    log_error_details: bool = True  # Attach ApiError.details to log entries

    # Request tracing
    request_id_header: str = Field(default="X-Request-ID", min_length=1)

    model_config = {"env_prefix": "ENVELOPE_"}
