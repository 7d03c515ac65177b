"""Content store and filesystem exceptions."""

from __future__ import annotations

from pathlib import Path

from arcgis_ai_context.exceptions.base import ContextError


class VersionNotFoundError(ContextError):
    """Raised when no SDK version can be resolved from the content store."""

    def __init__(self, version: str | None, available: list[str]) -> None:
        self.version = version
        self.available = tuple(available)
        if version is None:
            message = "No SDK versions available"
        else:
            message = f'SDK version "{version}" is not available'
        super().__init__(message)


class ContentNotFoundError(ContextError):
    """Raised when a version exists but lacks the requested content kind."""

    def __init__(self, label: str, version: str, path: Path) -> None:
        self.label = label
        self.version = version
        self.path = path
        super().__init__(f"{label} not found for SDK version {version}")


class SourceNotFoundError(ContextError, FileNotFoundError):
    """Raised by the directory copier when its source does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source directory does not exist: {path}")


class DestinationNotWritableError(ContextError, PermissionError):
    """Raised when an install destination's parent cannot be written."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot write to directory: {path}")
