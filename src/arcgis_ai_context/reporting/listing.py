"""Human-readable listing of bundled SDK versions and content."""

from __future__ import annotations

from pathlib import Path

from arcgis_ai_context.constants.branding import LISTING_TITLE, PROGRAM_NAME
from arcgis_ai_context.constants.content import INSTALL_TARGETS, SKILLS_KIND
from arcgis_ai_context.constants.reporting import BULLET, DESCRIPTION_MAX_WIDTH, TRUNCATION_MARKER
from arcgis_ai_context.content import available_versions, list_instruction_files, list_skill_entries
from arcgis_ai_context.reporting import style


def truncate_description(text: str, width: int = DESCRIPTION_MAX_WIDTH) -> str:
    """Cut *text* to *width* characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[:width] + TRUNCATION_MARKER


class ContentListing:
    """Renders the ``list`` command output for a content store."""

    def __init__(self, root: Path, *, color: bool = True) -> None:
        self._root = root
        self._color = color

    def render(self) -> str:
        """Render the full listing as a single string."""
        versions = available_versions(self._root)
        lines = [style.header(LISTING_TITLE, color=self._color), ""]
        lines.extend(self._render_versions(versions))
        lines.append("")
        if not versions:
            return "\n".join(lines)

        latest = versions[-1]
        lines.extend(self._render_skills(latest))
        lines.extend(self._render_instructions(latest))
        lines.append("")
        lines.extend(self._render_usage())
        return "\n".join(lines)

    def _bullet(self, text: str) -> str:
        c = self._color
        return f"  {style.colorize(BULLET, 'green', enabled=c)} {style.colorize(text, 'cyan', enabled=c)}"

    def _render_versions(self, versions: list[str]) -> list[str]:
        lines = [style.section_title("Available SDK Versions", color=self._color)]
        if not versions:
            lines.append(f"  {style.dim('No versions available', color=self._color)}")
            return lines

        latest = versions[-1]
        for version in versions:
            label = f" {style.colorize('(latest)', 'green', enabled=self._color)}" if version == latest else ""
            lines.append(self._bullet(version) + label)
        return lines

    def _render_skills(self, version: str) -> list[str]:
        if not (self._root / version / SKILLS_KIND).is_dir():
            return []

        entries, skill_count = list_skill_entries(self._root, version)

        target = INSTALL_TARGETS["skills"]
        lines = [
            style.section_title(f"{target.label} (SDK {version})", color=self._color),
            style.dim(f"  Installs to: {target.display_destination}", color=self._color),
        ]
        for entry in entries:
            lines.append(self._bullet(entry.name))
            if entry.description:
                lines.append(f"    {style.dim(truncate_description(entry.description), color=self._color)}")
        lines.append(f"  {style.dim(f'({skill_count} skills total)', color=self._color)}")
        return lines

    def _render_instructions(self, version: str) -> list[str]:
        files = list_instruction_files(self._root, version)
        if not files:
            return []

        target = INSTALL_TARGETS["copilot"]
        lines = [
            "",
            style.section_title(f"Copilot Instructions (SDK {version})", color=self._color),
            style.dim(f"  Installs to: {target.display_destination}", color=self._color),
        ]
        lines.extend(self._bullet(path.as_posix()) for path in files)
        lines.append(f"  {style.dim(f'({len(files)} files total)', color=self._color)}")
        return lines

    def _render_usage(self) -> list[str]:
        c = self._color
        return [
            style.dim("Usage:", color=c),
            style.dim(f"  {PROGRAM_NAME} skills              # Install skills (latest)", color=c),
            style.dim(f"  {PROGRAM_NAME} skills --sdk 4.34   # Install for specific version", color=c),
        ]
