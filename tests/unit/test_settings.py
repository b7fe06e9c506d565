"""Unit tests for EnvelopeSettings."""

import pytest

from apienvelope.config.settings import EnvelopeSettings


class TestEnvelopeSettings:
    def test_defaults_are_correct(self, clean_env: pytest.MonkeyPatch):
        settings = EnvelopeSettings()

        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.log_error_details is True
        assert settings.request_id_header == "X-Request-ID"

    def test_env_prefix_is_envelope(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("ENVELOPE_LOG_LEVEL", "DEBUG")
        clean_env.setenv("ENVELOPE_REQUEST_ID_HEADER", "X-Correlation-ID")

        settings = EnvelopeSettings()
        assert settings.log_level == "DEBUG"
        assert settings.request_id_header == "X-Correlation-ID"

    def test_boolean_flags_from_env(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("ENVELOPE_JSON_LOGS", "false")
        clean_env.setenv("ENVELOPE_LOG_ERROR_DETAILS", "0")

        settings = EnvelopeSettings()
        assert settings.json_logs is False
        assert settings.log_error_details is False

    def test_unprefixed_env_is_ignored(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("LOG_LEVEL", "ERROR")

        assert EnvelopeSettings().log_level == "INFO"

    def test_empty_request_id_header_rejected(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("ENVELOPE_REQUEST_ID_HEADER", "")

        with pytest.raises(Exception):
            EnvelopeSettings()

    def test_invalid_boolean_rejected(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv("ENVELOPE_JSON_LOGS", "sometimes")

        with pytest.raises(Exception):
            EnvelopeSettings()
