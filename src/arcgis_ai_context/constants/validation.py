"""Defaults and patterns for the bundled-skill validator."""

from __future__ import annotations

import re

CONFIG_FILENAME: str = "skills-validation.yaml"

DEFAULT_MIN_LINES: int = 250
DEFAULT_MAX_LINES: int = 1200
DEFAULT_CDN_HOST: str = "js.arcgis.com"

# Backtick-quoted identifiers that name web components, not skills.
DEFAULT_NON_SKILL_REFERENCES: tuple[str, ...] = (
    "arcgis-map",
    "arcgis-scene",
    "arcgis-placement",
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "versions",
        "min_lines",
        "max_lines",
        "cdn_host",
        "non_skill_references",
    }
)

RELATED_SKILLS_SECTION_PATTERN: re.Pattern[str] = re.compile(
    r"## Related Skills\r?\n(.*?)(?=\r?\n## |\Z)",
    re.DOTALL,
)
SKILL_REFERENCE_PATTERN: re.Pattern[str] = re.compile(r"`(arcgis-[a-z0-9-]+)`")
