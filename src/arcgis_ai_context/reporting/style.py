"""Stateless terminal formatting.

Every helper returns a new string; nothing here writes to a stream or keeps
state, so callers decide where output goes and whether it is coloured.
"""

from __future__ import annotations

import os
from typing import TextIO

from arcgis_ai_context.constants.reporting import (
    ANSI_RESET,
    COLOR_CODES,
    ERROR_MARK,
    INFO_MARK,
    NO_COLOR_ENV_VAR,
    SUCCESS_MARK,
    WARNING_MARK,
)


def colorize(text: str, color: str, *, enabled: bool = True) -> str:
    """Wrap *text* in the ANSI code named *color* when *enabled*."""
    code = COLOR_CODES.get(color)
    if not enabled or code is None:
        return text
    return f"{code}{text}{ANSI_RESET}"


def bold(text: str, *, color: bool = True) -> str:
    return colorize(text, "bold", enabled=color)


def dim(text: str, *, color: bool = True) -> str:
    return colorize(text, "dim", enabled=color)


def success(message: str, *, color: bool = True) -> str:
    return f"{colorize(SUCCESS_MARK, 'green', enabled=color)} {message}"


def error(message: str, *, color: bool = True) -> str:
    return f"{colorize(ERROR_MARK, 'red', enabled=color)} {message}"


def info(message: str, *, color: bool = True) -> str:
    return f"{colorize(INFO_MARK, 'cyan', enabled=color)} {message}"


def warning(message: str, *, color: bool = True) -> str:
    return f"{colorize(WARNING_MARK, 'yellow', enabled=color)} {message}"


def header(message: str, *, color: bool = True) -> str:
    """Section header preceded by a blank line."""
    return "\n" + bold(colorize(message, "magenta", enabled=color), color=color)


def section_title(message: str, *, color: bool = True) -> str:
    return bold(colorize(message, "blue", enabled=color), color=color)


def use_color(stream: TextIO, *, disabled: bool = False) -> bool:
    """Decide whether output to *stream* should carry ANSI codes."""
    if disabled or os.environ.get(NO_COLOR_ENV_VAR):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
