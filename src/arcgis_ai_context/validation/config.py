"""Validator configuration loaded from ``skills-validation.yaml``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from arcgis_ai_context.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CDN_HOST,
    DEFAULT_MAX_LINES,
    DEFAULT_MIN_LINES,
    DEFAULT_NON_SKILL_REFERENCES,
)
from arcgis_ai_context.content import is_version, version_key
from arcgis_ai_context.exceptions import ConfigError


@dataclass(frozen=True)
class ValidatorConfig:
    """Resolved validator settings.

    An empty ``versions`` tuple means every version found in the content root.
    """

    versions: tuple[str, ...] = ()
    min_lines: int = DEFAULT_MIN_LINES
    max_lines: int = DEFAULT_MAX_LINES
    cdn_host: str = DEFAULT_CDN_HOST
    non_skill_references: tuple[str, ...] = DEFAULT_NON_SKILL_REFERENCES


def load_config(root: Path, config_path: Path | None = None) -> ValidatorConfig:
    """Load config from ``skills-validation.yaml`` under *root* or an explicit path."""
    path = config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ValidatorConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    versions = tuple(_ensure_string_list(raw.get("versions", []), "versions"))
    for version in versions:
        if not is_version(version):
            raise ConfigError(f"versions entries must look like <major>.<minor>, got {version!r}")

    min_lines = _ensure_positive_int(raw.get("min_lines", DEFAULT_MIN_LINES), "min_lines")
    max_lines = _ensure_positive_int(raw.get("max_lines", DEFAULT_MAX_LINES), "max_lines")
    if min_lines > max_lines:
        raise ConfigError(f"min_lines ({min_lines}) must not exceed max_lines ({max_lines})")

    cdn_host = raw.get("cdn_host", DEFAULT_CDN_HOST)
    if not isinstance(cdn_host, str) or not cdn_host.strip():
        raise ConfigError("cdn_host must be a non-empty string")

    return ValidatorConfig(
        versions=tuple(sorted(set(versions), key=version_key)),
        min_lines=min_lines,
        max_lines=max_lines,
        cdn_host=cdn_host.strip(),
        non_skill_references=tuple(
            _ensure_string_list(
                raw.get("non_skill_references", list(DEFAULT_NON_SKILL_REFERENCES)),
                "non_skill_references",
            )
        ),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"{key_name} must be a string or list of strings")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} entries must be strings")
    return [item.strip() for item in value if item.strip()]


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value
