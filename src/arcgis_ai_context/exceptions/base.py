"""Root exception type."""

from __future__ import annotations


class ContextError(Exception):
    """Base class for all installer, lister and validator errors."""
