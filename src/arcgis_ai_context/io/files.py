"""Directory copy, file counting and writability probing."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from arcgis_ai_context.constants.content import WRITE_PROBE_PREFIX
from arcgis_ai_context.exceptions import SourceNotFoundError

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path) -> Path:
    """Recursively copy *source* into *destination* and return the destination.

    Missing destination directories are created. Files already present in
    *destination* are overwritten when the source has the same relative path
    and left alone otherwise. Errors raised part-way through propagate and may
    leave *destination* partially populated.
    """
    source = source.resolve()
    destination = destination.resolve()
    if not source.is_dir():
        raise SourceNotFoundError(source)

    logger.debug("Copying %s -> %s", source, destination)
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return destination


def count_files(path: Path) -> int:
    """Count non-directory entries below *path*; 0 when it does not exist."""
    if not path.is_dir():
        return 0
    return sum(1 for entry in path.rglob("*") if not entry.is_dir())


def is_writable(directory: Path) -> bool:
    """Return True if a file can be created and removed inside *directory*.

    The directory is created first when missing.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=directory, prefix=WRITE_PROBE_PREFIX):
            pass
    except OSError as exc:
        logger.debug("Write probe failed for %s: %s", directory, exc)
        return False
    return True
