"""Core data models for the AI context installer."""

from .entities import (
    Frontmatter,
    InstallTarget,
    SkillEntry,
    SkillReport,
    ValidationRun,
    VersionReport,
)

__all__ = [
    "Frontmatter",
    "InstallTarget",
    "SkillEntry",
    "SkillReport",
    "ValidationRun",
    "VersionReport",
]
