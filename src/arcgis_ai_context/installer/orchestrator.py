"""Install orchestration: version resolution, pre-flight checks, copy, report.

Every failure is reported on *out* and turned into a ``False`` result so the
CLI only has to map booleans to exit codes.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from arcgis_ai_context.constants.content import INSTALL_TARGETS, TARGET_GROUPS
from arcgis_ai_context.content import content_root as resolve_content_root
from arcgis_ai_context.content import resolve_version
from arcgis_ai_context.exceptions import (
    ContentNotFoundError,
    ContextError,
    DestinationNotWritableError,
    VersionNotFoundError,
)
from arcgis_ai_context.io import copy_tree, count_files, is_writable
from arcgis_ai_context.model import InstallTarget
from arcgis_ai_context.reporting import style

logger = logging.getLogger(__name__)


def resolve_targets(command: str) -> tuple[InstallTarget, ...]:
    """Return the install targets a CLI command expands to (empty if unknown)."""
    command = command.lower()
    if command in TARGET_GROUPS:
        return tuple(INSTALL_TARGETS[name] for name in TARGET_GROUPS[command])
    if command in INSTALL_TARGETS:
        return (INSTALL_TARGETS[command],)
    return ()


def install(
    target: InstallTarget,
    base_dir: Path,
    version: str | None = None,
    *,
    content_root: Path | None = None,
    color: bool = True,
    out: TextIO | None = None,
) -> bool:
    """Copy *target*'s content for *version* (latest when omitted) below *base_dir*.

    Returns True on success. Nothing is written when the version or its
    content is missing, or when the destination's parent is not writable.
    """
    stream = out if out is not None else sys.stdout
    root = resolve_content_root(content_root)

    def emit(line: str) -> None:
        print(line, file=stream)

    try:
        effective_version = resolve_version(root, version)
    except VersionNotFoundError as exc:
        emit(style.error(str(exc), color=color))
        return False

    dest_path = target.destination_path(base_dir)
    src_path = root / effective_version / target.content_kind

    emit(style.header(f"Installing {target.label} (SDK {effective_version})", color=color))
    emit(style.info(f"Source: {src_path}", color=color))
    emit(style.info(f"Target: {dest_path}", color=color))

    try:
        _preflight(target, effective_version, src_path, dest_path)
    except ContentNotFoundError as exc:
        emit(style.error(str(exc), color=color))
        return False
    except DestinationNotWritableError as exc:
        emit(style.error(str(exc), color=color))
        emit(style.error("Please check permissions and try again", color=color))
        return False

    try:
        copy_tree(src_path, dest_path)
        file_count = count_files(dest_path)
    except (ContextError, OSError) as exc:
        logger.debug("Install of %s failed", target.command, exc_info=True)
        emit(style.error(f"Failed to install {target.label}: {exc}", color=color))
        return False

    emit(style.success(f"Installed {file_count} {target.label} files for SDK {effective_version}", color=color))
    emit(style.success(f"Location: {style.colorize(str(dest_path), 'cyan', enabled=color)}", color=color))
    return True


def install_many(
    targets: Iterable[InstallTarget],
    base_dir: Path,
    version: str | None = None,
    *,
    content_root: Path | None = None,
    color: bool = True,
    out: TextIO | None = None,
) -> bool:
    """Install each target in order; True only if every install succeeded."""
    results = [
        install(target, base_dir, version, content_root=content_root, color=color, out=out) for target in targets
    ]
    return bool(results) and all(results)


def _preflight(target: InstallTarget, version: str, src_path: Path, dest_path: Path) -> None:
    if not src_path.is_dir():
        raise ContentNotFoundError(target.label, version, src_path)
    parent = dest_path.parent
    if not is_writable(parent):
        raise DestinationNotWritableError(parent)
