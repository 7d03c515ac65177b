"""Branding constants for help text and terminal output."""

from __future__ import annotations

PROGRAM_NAME: str = "arcgis-ai-context"
VALIDATOR_PROGRAM_NAME: str = "arcgis-ai-context-validate"
BANNER_TITLE: str = "ArcGIS Maps SDK for JavaScript - AI Context Installer"
LISTING_TITLE: str = "Available Agent Skills"
VALIDATOR_DESCRIPTION: str = "Lint bundled Agent Skills for frontmatter, length and cross-reference problems"
