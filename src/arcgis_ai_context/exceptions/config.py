"""Configuration-related exceptions."""

from __future__ import annotations

from arcgis_ai_context.exceptions.base import ContextError


class ConfigError(ContextError, ValueError):
    """Raised when validator configuration is invalid."""
