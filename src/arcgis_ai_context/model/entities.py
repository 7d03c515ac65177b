"""Immutable data models shared by the installer, lister and validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Frontmatter:
    """Parsed leading ``---`` block of a markdown file."""

    fields: dict[str, str]
    body: str
    end_line: int

    def get(self, key: str) -> str | None:
        """Return the trimmed value for *key*, or ``None`` when absent or empty."""
        value = self.fields.get(key)
        return value if value else None


@dataclass(frozen=True)
class InstallTarget:
    """A named destination that one content kind is copied into."""

    command: str
    label: str
    content_kind: str
    destination: tuple[str, ...]
    description: str = ""

    def destination_path(self, base_dir: Path) -> Path:
        """Return the absolute install destination below *base_dir*."""
        return base_dir.resolve().joinpath(*self.destination)

    @property
    def display_destination(self) -> str:
        """Destination rendered for help and listing output."""
        return "/".join(self.destination) + "/"


@dataclass(frozen=True)
class SkillEntry:
    """Display data for one bundled skill."""

    directory: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class SkillReport:
    """Validation outcome for a single skill directory."""

    name: str
    path: Path
    violations: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path.as_posix(),
            "passed": self.passed,
            "violations": list(self.violations),
        }


@dataclass(frozen=True)
class VersionReport:
    """Validation outcome for every skill of one SDK version."""

    version: str
    path: Path
    skills: tuple[SkillReport, ...] = ()
    skipped: bool = False

    @property
    def passed(self) -> int:
        return sum(1 for skill in self.skills if skill.passed)

    @property
    def failed(self) -> int:
        return sum(1 for skill in self.skills if not skill.passed)

    @property
    def total(self) -> int:
        return len(self.skills)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "path": self.path.as_posix(),
            "skipped": self.skipped,
            "passed": self.passed,
            "failed": self.failed,
            "total": self.total,
            "skills": [skill.to_dict() for skill in self.skills],
        }


@dataclass(frozen=True)
class ValidationRun:
    """Aggregate of all validated versions."""

    versions: tuple[VersionReport, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> int:
        return sum(report.passed for report in self.versions)

    @property
    def failed(self) -> int:
        return sum(report.failed for report in self.versions)

    @property
    def total(self) -> int:
        return sum(report.total for report in self.versions)

    @property
    def ok(self) -> bool:
        """True when at least one skill was validated and none failed."""
        return self.total > 0 and self.failed == 0
