"""Parsing-related exceptions."""

from __future__ import annotations

from arcgis_ai_context.exceptions.base import ContextError


class FrontmatterError(ContextError, ValueError):
    """Raised when a frontmatter block is opened but never closed."""
