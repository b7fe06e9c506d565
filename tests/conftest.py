"""Shared test fixtures for the envelope test suite."""

from __future__ import annotations

import logging
import os

import pytest

from apienvelope.config.settings import EnvelopeSettings


# ---------------------------------------------------------------------------
# Environment / settings fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove any ENVELOPE_* variables inherited from the outer environment."""
    for key in list(os.environ):
        if key.startswith("ENVELOPE_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def settings() -> EnvelopeSettings:
    """Test settings with plain-text logs and a custom request id header."""
    return EnvelopeSettings(
        log_level="DEBUG",
        json_logs=False,
        request_id_header="X-Trace-ID",
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)

