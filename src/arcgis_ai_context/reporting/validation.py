"""Stdout rendering of validator results."""

from __future__ import annotations

from arcgis_ai_context.constants.reporting import FAIL_MARK, PASS_MARK
from arcgis_ai_context.model import SkillReport, ValidationRun, VersionReport
from arcgis_ai_context.reporting.style import colorize


class ValidationReporter:
    """Formats a :class:`ValidationRun` as pass/fail lines with per-version totals."""

    def __init__(self, run: ValidationRun, *, color: bool = True) -> None:
        self._run = run
        self._color = color

    def render(self) -> str:
        """Render all version sections followed by the grand total."""
        sections = [self.render_version(report) for report in self._run.versions]
        sections.append(self.render_grand_total())
        return "\n".join(sections)

    def render_version(self, report: VersionReport) -> str:
        if report.skipped:
            return f"  Skills directory not found: {report.path} (skipping)"
        if not report.skills:
            return f"  No skill directories found in {report.path}"

        lines = [f"Validating {report.total} skills (v{report.version})...", ""]
        for skill in report.skills:
            lines.extend(self._render_skill(skill))
        lines.append("")
        lines.append(
            f"Results (v{report.version}): {report.passed} passed, {report.failed} failed, {report.total} total"
        )
        lines.append("")
        return "\n".join(lines)

    def render_grand_total(self) -> str:
        run = self._run
        return f"=== Grand Total: {run.passed} passed, {run.failed} failed, {run.total} skills ==="

    def _render_skill(self, skill: SkillReport) -> list[str]:
        if skill.passed:
            return [f"  {colorize(PASS_MARK, 'green', enabled=self._color)}  {skill.name}"]
        lines = [f"  {colorize(FAIL_MARK, 'red', enabled=self._color)}  {skill.name}"]
        lines.extend(f"       - {violation}" for violation in skill.violations)
        return lines
