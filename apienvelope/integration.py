"""Install the envelope integration onto a FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from apienvelope.config.settings import EnvelopeSettings
from apienvelope.logging_config import configure_logging
from apienvelope.middleware.error_handler import register_error_handlers
from apienvelope.middleware.request_id import RequestIdMiddleware

logger = logging.getLogger(__name__)


def install(app: FastAPI, settings: EnvelopeSettings | None = None) -> EnvelopeSettings:
    """Configure logging, error envelopes and request IDs on ``app``.

    Settings are read from ``ENVELOPE_*`` environment variables when not given.
    Returns the settings that were applied.
    """
    settings = settings or EnvelopeSettings()

    configure_logging(settings.log_level, json_format=settings.json_logs)

    app.state.log_error_details = settings.log_error_details
    app.state.request_id_header = settings.request_id_header
    register_error_handlers(app)
    app.add_middleware(RequestIdMiddleware, header_name=settings.request_id_header)

    logger.info(
        "Envelope integration installed (request id header: %s)",
        settings.request_id_header,
    )
    return settings
