"""Configuration module."""

from apienvelope.config.settings import EnvelopeSettings

__all__ = ["EnvelopeSettings"]
