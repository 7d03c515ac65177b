"""CLI entrypoint for the bundled-skill validator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from arcgis_ai_context import __version__
from arcgis_ai_context.constants.branding import VALIDATOR_DESCRIPTION, VALIDATOR_PROGRAM_NAME
from arcgis_ai_context.content import content_root as resolve_content_root
from arcgis_ai_context.content import is_version
from arcgis_ai_context.exceptions import ConfigError
from arcgis_ai_context.reporting.style import use_color
from arcgis_ai_context.reporting.validation import ValidationReporter
from arcgis_ai_context.reporting.writer import write_report
from arcgis_ai_context.validation import load_config, validate_content


def build_parser() -> argparse.ArgumentParser:
    """Build the validator CLI parser."""
    parser = argparse.ArgumentParser(prog=VALIDATOR_PROGRAM_NAME, description=VALIDATOR_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--content-root",
        type=Path,
        default=None,
        help="Content store root (defaults to the bundled contexts directory)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit validator config file")
    parser.add_argument(
        "-s",
        "--sdk",
        action="append",
        default=[],
        metavar="VERSION",
        help="Only validate this SDK version (repeat flag for multiple values)",
    )
    parser.add_argument("--json", type=Path, default=None, metavar="PATH", help="Also write a JSON report")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Log diagnostics to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Validate skills and return 1 if any skill failed or none were found."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s %(message)s")

    root = resolve_content_root(args.content_root)
    try:
        invalid = [version for version in args.sdk if not is_version(version)]
        if invalid:
            raise ConfigError(f"--sdk values must look like <major>.<minor>, got: {', '.join(invalid)}")
        config = load_config(root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    run = validate_content(root, config, versions=args.sdk)
    if run.total == 0:
        print("No skills found in any version directory", file=sys.stderr)
        return 1

    reporter = ValidationReporter(run, color=use_color(sys.stdout, disabled=args.no_color))
    print(reporter.render())

    if args.json is not None:
        write_report(args.json, run)

    return 0 if run.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
