"""SDK version discovery and ordering."""

from __future__ import annotations

import logging
from pathlib import Path

from arcgis_ai_context.constants.content import VERSION_PATTERN
from arcgis_ai_context.exceptions import VersionNotFoundError

logger = logging.getLogger(__name__)


def is_version(name: str) -> bool:
    """Return True if *name* looks like ``<major>.<minor>``."""
    return VERSION_PATTERN.match(name) is not None


def version_key(version: str) -> tuple[int, int]:
    """Return the numeric ``(major, minor)`` sort key for *version*."""
    match = VERSION_PATTERN.match(version)
    if match is None:
        raise ValueError(f"Not a <major>.<minor> version: {version!r}")
    return int(match.group(1)), int(match.group(2))


def available_versions(root: Path) -> list[str]:
    """List version directories under *root*, oldest first.

    A missing root yields an empty list. Entries that are not directories or
    whose names are not ``<major>.<minor>`` are ignored.
    """
    if not root.is_dir():
        logger.debug("Content root does not exist: %s", root)
        return []

    versions = [entry.name for entry in root.iterdir() if entry.is_dir() and is_version(entry.name)]
    return sorted(versions, key=version_key)


def latest_version(root: Path) -> str | None:
    """Return the newest version under *root*, or ``None`` when there is none."""
    versions = available_versions(root)
    return versions[-1] if versions else None


def resolve_version(root: Path, requested: str | None = None) -> str:
    """Return *requested* when available, else the latest version.

    Raises :class:`VersionNotFoundError` when nothing can be resolved.
    """
    versions = available_versions(root)
    if requested is None:
        if not versions:
            raise VersionNotFoundError(None, versions)
        return versions[-1]
    if requested not in versions:
        raise VersionNotFoundError(requested, versions)
    return requested
