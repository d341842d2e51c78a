# termifig/core/font.py

"""
Font loading for termifig.

A Font couples the verbatim lines of a FIGlet font file with its parsed
header. Reading the file is delegated to a ``read_lines`` callable so that
callers can supply fonts from somewhere other than the local filesystem.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from .header import FontHeader, parse_header
from ..exceptions import FontNotFoundError, InvalidFormatError

logger = logging.getLogger("termifig")

FONT_EXTENSION = ".flf"

ReadLines = Callable[[Path], Sequence[str]]


@dataclass(frozen=True)
class Font:
    """A loaded FIGlet font: raw file lines plus parsed header."""

    name: str
    raw_lines: Tuple[str, ...]
    header: FontHeader
    path: Optional[Path] = None

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def hard_blank(self) -> str:
        return self.header.hard_blank

    @property
    def signature(self) -> str:
        return self.header.signature

    @property
    def baseline(self) -> int:
        return self.header.baseline

    @property
    def max_length(self) -> int:
        return self.header.max_length

    @property
    def old_layout(self) -> int:
        return self.header.old_layout

    @property
    def full_layout(self) -> int:
        return self.header.full_layout

    @property
    def print_direction(self) -> int:
        return self.header.print_direction

    @property
    def comment_lines(self) -> int:
        return self.header.comment_lines

    @property
    def codetag_count(self) -> int:
        return self.header.codetag_count

    @classmethod
    def from_lines(cls, name: str, lines: Sequence[str], path: Optional[Path] = None) -> "Font":
        """Build a Font from raw file lines, parsing the first one as header."""
        raw_lines = tuple(lines)
        if not raw_lines:
            raise InvalidFormatError(name, "font file is empty")
        header = parse_header(raw_lines[0], font_name=name)
        return cls(name=name, raw_lines=raw_lines, header=header, path=path)


def font_path(font_name: str, font_dir: Union[str, Path]) -> Path:
    """Return the location of a font file: ``<font_dir>/<font_name>.flf``."""
    return Path(font_dir) / f"{font_name}{FONT_EXTENSION}"


def read_font_lines(path: Path) -> Sequence[str]:
    """Read a font file and return its lines, line terminators included."""
    path = Path(path)
    if not path.is_file():
        raise FontNotFoundError(str(path))

    with open(path, "r", encoding="latin-1", newline="") as fh:
        return fh.readlines()


def load_font(
    font_name: str,
    font_dir: Union[str, Path],
    read_lines: Optional[ReadLines] = None,
) -> Font:
    """Locate, read and parse the named font."""
    path = font_path(font_name, font_dir)
    reader = read_lines or read_font_lines

    try:
        lines = reader(path)
    except FileNotFoundError as e:
        raise FontNotFoundError(str(path), str(e)) from e

    font = Font.from_lines(font_name, lines, path=path)
    logger.debug(
        f"Loaded font '{font_name}' from {path} "
        f"(height={font.height}, comment_lines={font.comment_lines})"
    )
    return font
