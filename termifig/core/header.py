# termifig/core/header.py

"""
FIGlet font header parsing.

The first line of every FIGlet 2 font file describes the layout of the rest
of the file:

    flf2a$ 6 5 16 15 11 24463 0 229
    |  |   | | |  |  |  |     | |
    |  |   | | |  |  |  |     | codetag count
    |  |   | | |  |  |  |     print direction
    |  |   | | |  |  |  full layout
    |  |   | | |  |  comment lines
    |  |   | | |  old layout
    |  |   | | max line length
    |  |   | baseline
    |  |   height
    |  hard blank
    signature

Only the signature, hard blank and height are required; missing trailing
fields default to 0.
"""

from dataclasses import dataclass
from typing import List, Optional

from .utils import trace, is_integer_token
from ..exceptions import InvalidFormatError

FONT_SIGNATURE = "flf2a"

# Numeric header fields in file order, with a flag telling whether the field
# must be present.
HEADER_FIELDS = (
    ("height", True),
    ("baseline", False),
    ("max_length", False),
    ("old_layout", False),
    ("comment_lines", False),
    ("full_layout", False),
    ("print_direction", False),
    ("codetag_count", False),
)


@dataclass(frozen=True)
class FontHeader:
    """Structural parameters read from a font header line."""

    signature: str
    hard_blank: str
    height: int
    baseline: int = 0
    max_length: int = 0
    old_layout: int = 0
    comment_lines: int = 0
    full_layout: int = 0
    print_direction: int = 0
    codetag_count: int = 0

    def to_line(self) -> str:
        """Format the header back into a header line."""
        numbers = " ".join(str(getattr(self, name)) for name, _ in HEADER_FIELDS)
        return f"{self.signature}{self.hard_blank} {numbers}"


def _tokenize(line: str) -> List[str]:
    return line.rstrip("\r\n").split()


@trace
def parse_header(line: str, font_name: Optional[str] = None) -> FontHeader:
    """Parse a FIGlet header line into a FontHeader.

    Raises InvalidFormatError when the signature does not match, the line
    is too short to hold a signature and hard blank, or a numeric field is
    missing or malformed.
    """
    tokens = _tokenize(line)
    tag = tokens[0] if tokens else ""

    if len(tag) < len(FONT_SIGNATURE) + 1:
        raise InvalidFormatError(font_name, f"header too short: {line!r}")

    signature, hard_blank = tag[:len(FONT_SIGNATURE)], tag[len(FONT_SIGNATURE)]
    if signature != FONT_SIGNATURE:
        raise InvalidFormatError(font_name, f"invalid font file signature: {signature}")

    values = {}
    numbers = tokens[1:]
    for index, (name, required) in enumerate(HEADER_FIELDS):
        if index >= len(numbers):
            if required:
                raise InvalidFormatError(font_name, f"missing header field '{name}'")
            values[name] = 0
            continue

        token = numbers[index]
        if not is_integer_token(token):
            raise InvalidFormatError(
                font_name, f"header field '{name}' is not an integer: {token!r}"
            )
        values[name] = int(token)

    if values["height"] <= 0:
        raise InvalidFormatError(font_name, f"height must be positive, got {values['height']}")
    if values["comment_lines"] < 0:
        raise InvalidFormatError(
            font_name, f"comment line count must not be negative, got {values['comment_lines']}"
        )

    return FontHeader(signature=signature, hard_blank=hard_blank, **values)
