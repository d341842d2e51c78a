# termifig/core/glyphs.py

"""
Glyph extraction and caching.

FIGlet fonts store the glyphs for code points 32 through 126 back to back,
``height`` lines each, right after the header and comment lines. A glyph is
therefore located purely by arithmetic on its code point.
"""

import logging
from typing import Dict, Tuple

from .font import Font
from ..exceptions import OutOfRangeError

logger = logging.getLogger("termifig")

FIRST_CODE_POINT = 32
LAST_CODE_POINT = 126

END_MARK = "@"

Glyph = Tuple[str, ...]


def glyph_start_line(code_point: int, first_code_point: int, height: int, comment_lines: int) -> int:
    """Return the index of the first raw line holding the glyph for code_point.

    Line 0 is the header and the next ``comment_lines`` lines are comments.
    """
    return (code_point - first_code_point) * height + 1 + comment_lines


def extract_glyph(font: Font, character: str) -> Glyph:
    """Slice the rows of a character's glyph out of the font's raw lines."""
    if len(character) != 1:
        raise OutOfRangeError(character, "expected a single character")

    code_point = ord(character)
    if not FIRST_CODE_POINT <= code_point <= LAST_CODE_POINT:
        raise OutOfRangeError(
            character,
            f"code point {code_point} is outside {FIRST_CODE_POINT}-{LAST_CODE_POINT} "
            f"supported by font '{font.name}'",
        )

    start = glyph_start_line(code_point, FIRST_CODE_POINT, font.height, font.comment_lines)
    end = start + font.height
    if end > len(font.raw_lines):
        raise OutOfRangeError(
            character,
            f"font '{font.name}' is truncated: glyph needs lines {start}-{end - 1} "
            f"but the file has {len(font.raw_lines)} lines",
        )

    return tuple(
        line.rstrip("\r\n").replace(END_MARK, "").replace(font.hard_blank, " ")
        for line in font.raw_lines[start:end]
    )


class GlyphCache:
    """Memoizes extracted glyphs per ``(font name, character)``."""

    def __init__(self):
        self._glyphs: Dict[Tuple[str, str], Glyph] = {}

    def get(self, font: Font, character: str) -> Glyph:
        key = (font.name, character)
        glyph = self._glyphs.get(key)
        if glyph is None:
            glyph = extract_glyph(font, character)
            self._glyphs[key] = glyph
            logger.debug(f"Cached glyph {character!r} for font '{font.name}'")
        return glyph

    def clear(self) -> None:
        self._glyphs.clear()

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)
