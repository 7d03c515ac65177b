"""Individual content checks applied to one skill.

Each check returns a list of human-readable violation messages; an empty list
means the check passed.
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from arcgis_ai_context.constants.content import AGENTS_MARKDOWN_FILENAME
from arcgis_ai_context.constants.validation import RELATED_SKILLS_SECTION_PATTERN, SKILL_REFERENCE_PATTERN
from arcgis_ai_context.content import version_key
from arcgis_ai_context.model import Frontmatter


def check_required_fields(frontmatter: Frontmatter) -> list[str]:
    violations: list[str] = []
    if not frontmatter.get("name"):
        violations.append("Frontmatter missing 'name' field")
    if not frontmatter.get("description"):
        violations.append("Frontmatter missing 'description' field")
    return violations


def check_name_matches_directory(frontmatter: Frontmatter, dir_name: str) -> list[str]:
    name = frontmatter.get("name")
    if name and name != dir_name:
        return [f"Frontmatter 'name' (\"{name}\") does not match directory name (\"{dir_name}\")"]
    return []


def check_body(frontmatter: Frontmatter) -> list[str]:
    return [] if frontmatter.body else ["No content after frontmatter"]


def count_lines(text: str) -> int:
    """Number of newline-separated segments, so a trailing newline counts as a line."""
    return len(text.split("\n"))


def check_line_count(text: str, *, min_lines: int, max_lines: int) -> list[str]:
    line_count = count_lines(text)
    band = f"target {min_lines}-{max_lines}"
    if line_count < min_lines:
        return [f"File too short ({line_count} lines, {band})"]
    if line_count > max_lines:
        return [f"File too long ({line_count} lines, {band})"]
    return []


def check_legacy_references(text: str, *, version: str, legacy_version: str, cdn_host: str) -> list[str]:
    """Flag leftovers from *legacy_version* docs in a newer major version.

    Mentions of the legacy version string are allowed when the file also talks
    about the legacy major generically (``4.x``), which covers the
    "no 4.x equivalent" phrasing used in migration notes.
    """
    legacy_major = version_key(legacy_version)[0]
    wildcard = f"{legacy_major}.x"
    violations: list[str] = []
    if f"{cdn_host}/{legacy_major}." in text:
        violations.append(f"Contains old {wildcard} CDN URL (should use {version})")
    if legacy_version in text and f"no {wildcard} equivalent" not in text and wildcard not in text:
        violations.append(f"Contains explicit '{legacy_version}' version reference")
    return violations


def check_related_skills(text: str, sibling_names: Collection[str], non_skill_references: Collection[str]) -> list[str]:
    match = RELATED_SKILLS_SECTION_PATTERN.search(text)
    if match is None:
        return []

    violations: list[str] = []
    for reference in SKILL_REFERENCE_PATTERN.findall(match.group(1)):
        if reference in non_skill_references:
            continue
        if reference not in sibling_names:
            violations.append(f"Related Skills references non-existent skill: {reference}")
    return violations


def check_agents_md(skill_dir: Path) -> list[str]:
    agents_path = skill_dir / AGENTS_MARKDOWN_FILENAME
    if not agents_path.is_file():
        return []
    try:
        content = agents_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return [f"Cannot read {AGENTS_MARKDOWN_FILENAME}: {exc}"]
    if not content.strip():
        return [f"{AGENTS_MARKDOWN_FILENAME} exists but is empty"]
    return []
