"""Line-based parser for the ``key: value`` frontmatter used by skill files.

Values are kept verbatim rather than loaded as YAML. The first line must be
``---``, every following line up to the next ``---`` is split at its first
colon, and whatever follows the closing delimiter is the body.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from arcgis_ai_context.exceptions import FrontmatterError
from arcgis_ai_context.model import Frontmatter

FRONTMATTER_DELIMITER = "---"


class _State(Enum):
    START = "start"
    FIELDS = "fields"
    BODY = "body"


def parse_frontmatter(text: str) -> Frontmatter | None:
    """Parse a frontmatter block from *text*.

    Returns ``None`` when the text does not open with a ``---`` line and raises
    :class:`FrontmatterError` when the block is opened but never closed.
    """
    lines = text.lstrip("\ufeff").split("\n")
    fields: dict[str, str] = {}
    state = _State.START
    end_line = 0

    for index, raw_line in enumerate(lines):
        line = raw_line.rstrip("\r")
        if state is _State.START:
            if line.strip() != FRONTMATTER_DELIMITER:
                return None
            state = _State.FIELDS
        elif state is _State.FIELDS:
            if line.strip() == FRONTMATTER_DELIMITER:
                state = _State.BODY
                end_line = index
                break
            key, sep, value = line.partition(":")
            key = key.strip()
            if sep and key:
                fields[key] = value.strip()

    if state is _State.FIELDS:
        raise FrontmatterError("Unterminated frontmatter block (no closing ---)")

    body = "\n".join(lines[end_line + 1 :]).strip()
    return Frontmatter(fields=fields, body=body, end_line=end_line + 1)


def read_frontmatter(path: Path) -> Frontmatter | None:
    """Read *path* as UTF-8 and parse its frontmatter block."""
    return parse_frontmatter(path.read_text(encoding="utf-8"))
