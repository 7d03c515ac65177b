"""JSON report writer for validator runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from arcgis_ai_context import __version__
from arcgis_ai_context.constants.reporting import REPORT_SCHEMA_VERSION
from arcgis_ai_context.io import write_json_atomic
from arcgis_ai_context.model import ValidationRun


def build_report(run: ValidationRun) -> dict[str, Any]:
    """Return the JSON-serialisable payload for *run*."""
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "tool_version": __version__,
        "passed": run.passed,
        "failed": run.failed,
        "total": run.total,
        "versions": [report.to_dict() for report in run.versions],
    }


def write_report(path: Path, run: ValidationRun) -> Path:
    """Write the report for *run* to *path* and return it."""
    write_json_atomic(path=path, payload=build_report(run))
    return path
