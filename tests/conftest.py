"""Shared pytest fixtures: synthetic content stores and skill builders."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SkillFactory = Callable[..., Path]


def render_skill(
    name: str,
    *,
    description: str | None = "Work with the ArcGIS Maps SDK for JavaScript.",
    body: str = "# Overview\n\nUse this skill for maps.",
    total_lines: int = 300,
    frontmatter_name: str | None = None,
) -> str:
    """Render SKILL.md text padded to exactly *total_lines* newline-separated lines."""
    header = ["---", f"name: {frontmatter_name if frontmatter_name is not None else name}"]
    if description is not None:
        header.append(f"description: {description}")
    header.append("---")
    lines = header + body.split("\n")
    padding = total_lines - len(lines) - 1
    lines.extend(f"Detail line {index}." for index in range(max(padding, 0)))
    return "\n".join(lines) + "\n"


@pytest.fixture()
def make_skill() -> SkillFactory:
    """Return a factory writing ``<skills_dir>/<name>/SKILL.md`` (and optionally AGENTS.md)."""

    def _make(skills_dir: Path, name: str, *, text: str | None = None, agents: str | None = None, **kwargs) -> Path:
        skill_dir = skills_dir / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        content = text if text is not None else render_skill(name, **kwargs)
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        if agents is not None:
            (skill_dir / "AGENTS.md").write_text(agents, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture()
def content_store(tmp_path: Path, make_skill: SkillFactory) -> Path:
    """Content store with SDK 4.34 and 5.0, each holding skills and instructions."""
    root = tmp_path / "contexts"
    for version in ("4.34", "5.0"):
        skills_dir = root / version / "skills"
        make_skill(skills_dir, "arcgis-core-maps", description=f"Core maps for SDK {version}", agents="# Agents\n")
        make_skill(skills_dir, "arcgis-widgets", description="Widgets and UI components")
        (skills_dir / "arcgis-core-maps" / "reference").mkdir()
        (skills_dir / "arcgis-core-maps" / "reference" / f"notes-{version}.md").write_text(
            f"Notes for {version}\n", encoding="utf-8"
        )
        instructions_dir = root / version / "instructions"
        instructions_dir.mkdir(parents=True)
        (instructions_dir / "arcgis.instructions.md").write_text(f"Instructions {version}\n", encoding="utf-8")
    return root
