"""Lint bundled Agent Skills content."""

from .config import ValidatorConfig, load_config
from .runner import legacy_version_for, validate_content, validate_skill, validate_version

__all__ = [
    "ValidatorConfig",
    "legacy_version_for",
    "load_config",
    "validate_content",
    "validate_skill",
    "validate_version",
]
