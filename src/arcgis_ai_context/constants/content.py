"""Constants describing the bundled content store and install targets."""

from __future__ import annotations

import re
from pathlib import Path

from arcgis_ai_context.model import InstallTarget

CONTEXTS_DIRNAME: str = "contexts"
BUNDLED_CONTENT_ROOT: Path = Path(__file__).resolve().parent.parent / CONTEXTS_DIRNAME

VERSION_PATTERN: re.Pattern[str] = re.compile(r"^(\d+)\.(\d+)$")

SKILLS_KIND: str = "skills"
INSTRUCTIONS_KIND: str = "instructions"

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
AGENTS_MARKDOWN_FILENAME: str = "AGENTS.md"
MARKDOWN_SUFFIX: str = ".md"

WRITE_PROBE_PREFIX: str = ".write-test-"

INSTALL_TARGETS: dict[str, InstallTarget] = {
    "skills": InstallTarget(
        command="skills",
        label="Agent Skills",
        content_kind=SKILLS_KIND,
        destination=(".github", "skills"),
        description="Install Agent Skills to .github/skills/",
    ),
    "claude": InstallTarget(
        command="claude",
        label="Claude skills",
        content_kind=SKILLS_KIND,
        destination=(".claude", "skills"),
        description="Install Claude skills to .claude/skills/",
    ),
    "copilot": InstallTarget(
        command="copilot",
        label="Copilot instructions",
        content_kind=INSTRUCTIONS_KIND,
        destination=(".github", "instructions"),
        description="Install Copilot instructions to .github/instructions/",
    ),
}

# Commands that expand to several install targets.
TARGET_GROUPS: dict[str, tuple[str, ...]] = {
    "all": ("claude", "copilot"),
}
ALL_DESCRIPTION: str = "Install Claude skills and Copilot instructions"
LIST_DESCRIPTION: str = "Show available contexts and SDK versions"
