"""Constants for terminal formatting and report files."""

from __future__ import annotations

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_BLUE: str = "\033[34m"
ANSI_MAGENTA: str = "\033[35m"
ANSI_CYAN: str = "\033[36m"
ANSI_WHITE: str = "\033[37m"

COLOR_CODES: dict[str, str] = {
    "bold": ANSI_BOLD,
    "dim": ANSI_DIM,
    "red": ANSI_RED,
    "green": ANSI_GREEN,
    "yellow": ANSI_YELLOW,
    "blue": ANSI_BLUE,
    "magenta": ANSI_MAGENTA,
    "cyan": ANSI_CYAN,
    "white": ANSI_WHITE,
}

SUCCESS_MARK: str = "✔"
ERROR_MARK: str = "✘"
INFO_MARK: str = "ℹ"
WARNING_MARK: str = "⚠"
BULLET: str = "•"
PASS_MARK: str = "✓"
FAIL_MARK: str = "✗"

DESCRIPTION_MAX_WIDTH: int = 60
TRUNCATION_MARKER: str = "..."

NO_COLOR_ENV_VAR: str = "NO_COLOR"

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"
REPORT_SCHEMA_VERSION: str = "1.0.0"
