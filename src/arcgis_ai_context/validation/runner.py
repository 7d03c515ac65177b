"""Walk the content store and validate every skill of every configured version."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from pathlib import Path

from arcgis_ai_context.constants.content import SKILL_MARKDOWN_FILENAME, SKILLS_KIND
from arcgis_ai_context.content import available_versions, list_skill_dirs, version_key
from arcgis_ai_context.exceptions import FrontmatterError
from arcgis_ai_context.model import SkillReport, ValidationRun, VersionReport
from arcgis_ai_context.parsers import parse_frontmatter
from arcgis_ai_context.validation.config import ValidatorConfig
from arcgis_ai_context.validation.rules import (
    check_agents_md,
    check_body,
    check_legacy_references,
    check_line_count,
    check_name_matches_directory,
    check_related_skills,
    check_required_fields,
)

logger = logging.getLogger(__name__)

MISSING_FRONTMATTER_MESSAGE = "Missing frontmatter block (file must start with ---)"


def legacy_version_for(version: str, known_versions: Iterable[str]) -> str | None:
    """Return the newest known version with a lower major than *version*."""
    major = version_key(version)[0]
    older = [candidate for candidate in known_versions if version_key(candidate)[0] < major]
    return max(older, key=version_key) if older else None


def validate_skill(
    skill_dir: Path,
    *,
    version: str,
    sibling_names: Collection[str],
    config: ValidatorConfig,
    legacy_version: str | None = None,
) -> SkillReport:
    """Run every content check against one skill directory."""
    skill_md = skill_dir / SKILL_MARKDOWN_FILENAME
    if not skill_md.is_file():
        return SkillReport(name=skill_dir.name, path=skill_dir, violations=(f"{SKILL_MARKDOWN_FILENAME} not found",))

    violations: list[str] = []
    try:
        text = skill_md.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", skill_md, exc)
        violations.append(f"Cannot read {SKILL_MARKDOWN_FILENAME}: {exc}")
        violations.extend(check_agents_md(skill_dir))
        return SkillReport(name=skill_dir.name, path=skill_dir, violations=tuple(violations))

    try:
        frontmatter = parse_frontmatter(text)
    except FrontmatterError as exc:
        frontmatter = None
        violations.append(str(exc))
    else:
        if frontmatter is None:
            violations.append(MISSING_FRONTMATTER_MESSAGE)

    if frontmatter is not None:
        violations.extend(check_required_fields(frontmatter))
        violations.extend(check_name_matches_directory(frontmatter, skill_dir.name))
        violations.extend(check_body(frontmatter))
        violations.extend(check_line_count(text, min_lines=config.min_lines, max_lines=config.max_lines))
        if legacy_version is not None:
            violations.extend(
                check_legacy_references(
                    text,
                    version=version,
                    legacy_version=legacy_version,
                    cdn_host=config.cdn_host,
                )
            )
        violations.extend(check_related_skills(text, sibling_names, config.non_skill_references))

    violations.extend(check_agents_md(skill_dir))
    return SkillReport(name=skill_dir.name, path=skill_dir, violations=tuple(violations))


def validate_version(
    root: Path,
    version: str,
    config: ValidatorConfig,
    *,
    legacy_version: str | None = None,
) -> VersionReport:
    """Validate all skills of *version*; a missing skills directory is skipped."""
    skills_dir = root / version / SKILLS_KIND
    if not skills_dir.is_dir():
        logger.debug("Skipping version %s: %s does not exist", version, skills_dir)
        return VersionReport(version=version, path=skills_dir, skipped=True)

    skill_dirs = list_skill_dirs(skills_dir)
    sibling_names = frozenset(path.name for path in skill_dirs)
    reports = tuple(
        validate_skill(
            skill_dir,
            version=version,
            sibling_names=sibling_names,
            config=config,
            legacy_version=legacy_version,
        )
        for skill_dir in skill_dirs
    )
    return VersionReport(version=version, path=skills_dir, skills=reports)


def validate_content(
    root: Path,
    config: ValidatorConfig,
    *,
    versions: Iterable[str] | None = None,
) -> ValidationRun:
    """Validate the configured versions of the content store at *root*.

    *versions* overrides the configured list; when both are empty every
    discovered version is validated.
    """
    discovered = available_versions(root)
    selected = tuple(versions) if versions else config.versions
    if not selected:
        selected = tuple(discovered)
    selected = tuple(sorted(set(selected), key=version_key))

    known = set(discovered) | set(config.versions) | set(selected)
    reports = tuple(
        validate_version(root, version, config, legacy_version=legacy_version_for(version, known))
        for version in selected
    )
    return ValidationRun(versions=reports)
