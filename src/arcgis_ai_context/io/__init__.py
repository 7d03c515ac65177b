"""Shared file I/O helpers."""

from .files import copy_tree, count_files, is_writable
from .json_io import write_json_atomic

__all__ = ["copy_tree", "count_files", "is_writable", "write_json_atomic"]
