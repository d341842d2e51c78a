# termifig/core/compositor.py

"""
Glyph composition.

Glyphs are laid side by side, row by row, strictly in input order. Optional
stretching pads every glyph with a fixed number of spaces on its right.
"""

import logging
import re
from typing import Any, Sequence

from .utils import is_integer_token

logger = logging.getLogger("termifig")

_NEWLINES = re.compile(r"[\r\n]")


def normalize_stretching(value: Any) -> int:
    """Coerce a stretch factor to a non-negative int.

    Non-numeric and negative values become 0 rather than raising.
    """
    if isinstance(value, bool):
        stretching = 0
    elif isinstance(value, int):
        stretching = value
    elif isinstance(value, float) and value.is_integer():
        stretching = int(value)
    elif isinstance(value, str) and is_integer_token(value.strip()):
        stretching = int(value.strip())
    else:
        stretching = 0

    if stretching < 0:
        stretching = 0
    if stretching == 0 and value not in (0, "0"):
        logger.debug(f"Stretching value {value!r} treated as 0")
    return stretching


def stretch_padding(stretching: Any) -> str:
    """Return the padding inserted after each glyph."""
    return " " * normalize_stretching(stretching)


def compose(glyphs: Sequence[Sequence[str]], height: int, stretching: Any = 0) -> str:
    """Join glyphs horizontally into a block of ``height`` newline-separated rows."""
    padding = stretch_padding(stretching)
    rows = []
    for row in range(height):
        line = "".join(glyph[row] + padding for glyph in glyphs)
        rows.append(_NEWLINES.sub("", line))
    return "\n".join(rows)
