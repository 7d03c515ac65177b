"""Parsers for bundled markdown content."""

from .frontmatter import parse_frontmatter, read_frontmatter

__all__ = ["parse_frontmatter", "read_frontmatter"]
