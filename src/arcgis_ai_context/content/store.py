"""Skill and instruction enumeration for one version of the content store."""

from __future__ import annotations

import logging
from pathlib import Path

from arcgis_ai_context.constants.content import (
    BUNDLED_CONTENT_ROOT,
    INSTRUCTIONS_KIND,
    MARKDOWN_SUFFIX,
    SKILL_MARKDOWN_FILENAME,
    SKILLS_KIND,
)
from arcgis_ai_context.exceptions import FrontmatterError
from arcgis_ai_context.model import SkillEntry
from arcgis_ai_context.parsers import read_frontmatter

logger = logging.getLogger(__name__)


def content_root(override: Path | None = None) -> Path:
    """Return the content store root, defaulting to the bundled ``contexts`` directory."""
    return (override if override is not None else BUNDLED_CONTENT_ROOT).resolve()


def list_skill_dirs(skills_dir: Path) -> list[Path]:
    """Return immediate subdirectories of *skills_dir* sorted by name."""
    if not skills_dir.is_dir():
        return []
    return sorted((entry for entry in skills_dir.iterdir() if entry.is_dir()), key=lambda entry: entry.name)


def skill_entry(skill_dir: Path) -> SkillEntry | None:
    """Build display data for *skill_dir*, or ``None`` when it has no ``SKILL.md``.

    The display name falls back to the directory name and the description is
    omitted when the frontmatter lacks it or cannot be read.
    """
    skill_md = skill_dir / SKILL_MARKDOWN_FILENAME
    if not skill_md.is_file():
        return None

    try:
        frontmatter = read_frontmatter(skill_md)
    except (OSError, UnicodeDecodeError, FrontmatterError) as exc:
        logger.warning("Cannot read frontmatter of %s: %s", skill_md, exc)
        frontmatter = None

    if frontmatter is None:
        return SkillEntry(directory=skill_dir.name, name=skill_dir.name)
    return SkillEntry(
        directory=skill_dir.name,
        name=frontmatter.get("name") or skill_dir.name,
        description=frontmatter.get("description"),
    )


def list_skill_entries(root: Path, version: str) -> tuple[list[SkillEntry], int]:
    """Return displayable skills for *version* and the number of skill directories."""
    skill_dirs = list_skill_dirs(root / version / SKILLS_KIND)
    entries = [entry for entry in (skill_entry(path) for path in skill_dirs) if entry is not None]
    return entries, len(skill_dirs)


def list_instruction_files(root: Path, version: str) -> list[Path]:
    """Return markdown instruction files bundled for *version*, relative to their kind directory."""
    instructions_dir = root / version / INSTRUCTIONS_KIND
    if not instructions_dir.is_dir():
        return []
    return sorted(
        path.relative_to(instructions_dir)
        for path in instructions_dir.rglob(f"*{MARKDOWN_SUFFIX}")
        if path.is_file()
    )
