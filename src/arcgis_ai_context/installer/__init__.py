"""Copy bundled content into a project directory."""

from .orchestrator import install, install_many, resolve_targets

__all__ = ["install", "install_many", "resolve_targets"]
