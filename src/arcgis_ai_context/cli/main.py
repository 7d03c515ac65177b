"""CLI entrypoint for the AI context installer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from arcgis_ai_context import __version__
from arcgis_ai_context.constants.branding import BANNER_TITLE, PROGRAM_NAME
from arcgis_ai_context.constants.content import ALL_DESCRIPTION, INSTALL_TARGETS, LIST_DESCRIPTION, TARGET_GROUPS
from arcgis_ai_context.content import available_versions, resolve_version
from arcgis_ai_context.content import content_root as resolve_content_root
from arcgis_ai_context.exceptions import VersionNotFoundError
from arcgis_ai_context.installer import install_many, resolve_targets
from arcgis_ai_context.reporting import style
from arcgis_ai_context.reporting.listing import ContentListing

LIST_COMMAND = "list"


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Help and version are plain flags so the banner-style help text can list the
    SDK versions found in the content store.
    """
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, description=BANNER_TITLE, add_help=False)
    parser.add_argument("command", nargs="?", default=None, help="Command to run")
    parser.add_argument("--sdk", metavar="VERSION", default=None, help="ArcGIS SDK version (e.g., 4.34)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    parser.add_argument("-v", "--version", action="store_true", help="Show package version number")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Log diagnostics to stderr")
    return parser


def command_descriptions() -> dict[str, str]:
    """Return help text per command, in display order."""
    descriptions = {name: target.description for name, target in INSTALL_TARGETS.items()}
    descriptions.update({name: ALL_DESCRIPTION for name in TARGET_GROUPS})
    descriptions[LIST_COMMAND] = LIST_DESCRIPTION
    return descriptions


def render_banner(*, color: bool = True) -> str:
    title = style.bold(style.colorize(f"  {BANNER_TITLE}", "cyan", enabled=color), color=color)
    return "\n".join(["", title, style.dim(f"  Version {__version__}", color=color), ""])


def render_help(versions: list[str], *, color: bool = True) -> str:
    """Render usage, commands, options, available versions and examples."""
    c = color

    def option(flag: str, text: str) -> str:
        return f"  {style.colorize(flag.ljust(16), 'cyan', enabled=c)} {text}"

    lines = [render_banner(color=c), style.bold("USAGE", color=c), f"  {PROGRAM_NAME} <command> [options]", ""]

    lines.append(style.bold("COMMANDS", color=c))
    for name, description in command_descriptions().items():
        lines.append(f"  {style.colorize(name.ljust(12), 'cyan', enabled=c)} {description}")
    lines.append("")

    lines.append(style.bold("OPTIONS", color=c))
    lines.append(option("--sdk <ver>", "ArcGIS SDK version (e.g., 4.34)"))
    lines.append(option("--no-color", "Disable colored output"))
    lines.append(option("--help, -h", "Show this help message"))
    lines.append(option("--version, -v", "Show package version number"))
    lines.append("")

    lines.append(style.bold("AVAILABLE SDK VERSIONS", color=c))
    if versions:
        lines.append(f"  {', '.join(versions)} {style.dim(f'(default: {versions[-1]})', color=c)}")
    else:
        lines.append(f"  {style.dim('No versions available', color=c)}")
    lines.append("")

    lines.append(style.bold("EXAMPLES", color=c))
    for comment, example in (
        ("Install Agent Skills (latest SDK version)", "skills"),
        ("Install Claude skills for specific SDK version", "claude --sdk 4.34"),
        ("Install everything", "all"),
        ("List available contexts and versions", LIST_COMMAND),
    ):
        lines.append(style.dim(f"  # {comment}", color=c))
        lines.append(f"  {PROGRAM_NAME} {example}")
        lines.append("")

    return "\n".join(lines)


def main(
    argv: list[str] | None = None,
    *,
    base_dir: Path | None = None,
    content_root: Path | None = None,
) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s %(message)s")
    color = style.use_color(sys.stdout, disabled=args.no_color)
    root = resolve_content_root(content_root)
    versions = available_versions(root)

    if args.help or (args.command is None and not args.version):
        print(render_help(versions, color=color))
        return 0

    if args.version:
        print(f"{PROGRAM_NAME} v{__version__}")
        return 0

    if args.sdk is not None:
        try:
            resolve_version(root, args.sdk)
        except VersionNotFoundError as exc:
            print(f"{style.colorize('Error:', 'red', enabled=color)} {exc}.")
            print(f"Available versions: {', '.join(exc.available) if exc.available else 'none'}")
            return 1

    print(render_banner(color=color))

    command = args.command.lower()
    if command == LIST_COMMAND:
        print(ContentListing(root, color=color).render())
        print()
        return 0

    targets = resolve_targets(command)
    if not targets:
        print(f'{style.colorize("Error:", "red", enabled=color)} Unknown command "{args.command}"')
        print()
        print(f"Run {style.colorize(f'{PROGRAM_NAME} --help', 'cyan', enabled=color)} for usage information.")
        return 1

    succeeded = install_many(
        targets,
        base_dir if base_dir is not None else Path.cwd(),
        args.sdk,
        content_root=root,
        color=color,
    )
    print()
    return 0 if succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
