#!/usr/bin/env python3
"""Validate the bundled Agent Skills before publishing.

Usage:
    python scripts/validate_skills.py
    python scripts/validate_skills.py --sdk 5.0 --json build/validation.json

Exit codes:
    0 - every skill passed
    1 - at least one skill failed, or no skills were found
    2 - invalid validator configuration
"""

from __future__ import annotations

import sys

from arcgis_ai_context.cli.validate import main

if __name__ == "__main__":
    sys.exit(main())
