"""Tests for per-skill validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from arcgis_ai_context.parsers import parse_frontmatter
from arcgis_ai_context.validation.rules import (
    check_agents_md,
    check_body,
    check_legacy_references,
    check_line_count,
    check_name_matches_directory,
    check_related_skills,
    check_required_fields,
    count_lines,
)


def _frontmatter(text: str):
    parsed = parse_frontmatter(text)
    assert parsed is not None
    return parsed


def test_required_fields_reported_independently() -> None:
    fm = _frontmatter("---\nother: x\n---\nbody")

    assert check_required_fields(fm) == [
        "Frontmatter missing 'name' field",
        "Frontmatter missing 'description' field",
    ]


def test_name_mismatch_names_both_values() -> None:
    fm = _frontmatter("---\nname: arcgis-maps\ndescription: d\n---\nbody")

    assert check_name_matches_directory(fm, "arcgis-core-maps") == [
        "Frontmatter 'name' (\"arcgis-maps\") does not match directory name (\"arcgis-core-maps\")"
    ]
    assert check_name_matches_directory(fm, "arcgis-maps") == []


def test_body_must_be_non_empty() -> None:
    assert check_body(_frontmatter("---\nname: a\n---\n  \n")) == ["No content after frontmatter"]
    assert check_body(_frontmatter("---\nname: a\n---\ncontent")) == []


def test_count_lines_counts_trailing_newline_segment() -> None:
    assert count_lines("a\nb\n") == 3
    assert count_lines("a") == 1


@pytest.mark.parametrize(
    ("line_total", "expected"),
    [
        (249, ["File too short (249 lines, target 250-1200)"]),
        (250, []),
        (1200, []),
        (1201, ["File too long (1201 lines, target 250-1200)"]),
    ],
)
def test_line_count_band(line_total: int, expected: list[str]) -> None:
    text = "\n".join(["x"] * line_total)

    assert check_line_count(text, min_lines=250, max_lines=1200) == expected


def test_legacy_cdn_url_flagged() -> None:
    text = 'Load <script src="https://js.arcgis.com/4.34/"></script>'

    violations = check_legacy_references(text, version="5.0", legacy_version="4.34", cdn_host="js.arcgis.com")

    assert "Contains old 4.x CDN URL (should use 5.0)" in violations


def test_legacy_version_string_flagged_without_qualifier() -> None:
    violations = check_legacy_references(
        "Introduced in 4.34.", version="5.0", legacy_version="4.34", cdn_host="js.arcgis.com"
    )

    assert violations == ["Contains explicit '4.34' version reference"]


@pytest.mark.parametrize(
    "text",
    [
        "Changed since 4.34; there is no 4.x equivalent.",
        "Unlike 4.x, the 4.34 API used widgets.",
        "Uses https://js.arcgis.com/5.0/ only.",
    ],
)
def test_legacy_version_string_allowed_when_qualified(text: str) -> None:
    assert check_legacy_references(text, version="5.0", legacy_version="4.34", cdn_host="js.arcgis.com") == []


def test_related_skills_flags_unknown_references() -> None:
    text = "\n".join(
        [
            "# Skill",
            "## Related Skills",
            "- `arcgis-widgets` for UI",
            "- `arcgis-missing` does not exist",
            "- `arcgis-map` is a component",
            "## Next",
            "- `arcgis-elsewhere` outside the section",
        ]
    )

    violations = check_related_skills(text, {"arcgis-widgets"}, ("arcgis-map",))

    assert violations == ["Related Skills references non-existent skill: arcgis-missing"]


def test_related_skills_section_at_end_of_file() -> None:
    text = "# Skill\n## Related Skills\n- `arcgis-gone`\n"

    assert check_related_skills(text, set(), ()) == ["Related Skills references non-existent skill: arcgis-gone"]


def test_related_skills_absent_section_passes() -> None:
    assert check_related_skills("# Skill\n`arcgis-gone`\n", set(), ()) == []


def test_agents_md_must_not_be_blank(tmp_path: Path) -> None:
    assert check_agents_md(tmp_path) == []

    (tmp_path / "AGENTS.md").write_text(" \n\n", encoding="utf-8")
    assert check_agents_md(tmp_path) == ["AGENTS.md exists but is empty"]

    (tmp_path / "AGENTS.md").write_text("# Agents\n", encoding="utf-8")
    assert check_agents_md(tmp_path) == []
