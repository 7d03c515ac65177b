"""Read-only access to the bundled, versioned content store."""

from .store import content_root, list_instruction_files, list_skill_dirs, list_skill_entries, skill_entry
from .versions import available_versions, is_version, latest_version, resolve_version, version_key

__all__ = [
    "available_versions",
    "content_root",
    "is_version",
    "latest_version",
    "list_instruction_files",
    "list_skill_dirs",
    "list_skill_entries",
    "resolve_version",
    "skill_entry",
    "version_key",
]
