"""Shared exception hierarchy for the AI context installer."""

from __future__ import annotations

from .base import ContextError
from .config import ConfigError
from .content import (
    ContentNotFoundError,
    DestinationNotWritableError,
    SourceNotFoundError,
    VersionNotFoundError,
)
from .parsing import FrontmatterError

__all__ = [
    "ConfigError",
    "ContentNotFoundError",
    "ContextError",
    "DestinationNotWritableError",
    "FrontmatterError",
    "SourceNotFoundError",
    "VersionNotFoundError",
]
