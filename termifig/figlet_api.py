# figlet_api.py

"""Complete public API for termifig: render text as FIGlet ASCII art.

This module serves as the single source of truth for all public API components.
"""

from .core.ascii_utils import fig_ascii
from .core.colors import BACKGROUND_COLORS, FONT_COLORS, colorize
from .core.engine import Figlet
from .core.font import Font, load_font, read_font_lines
from .core.header import FontHeader, parse_header
from .core.settings import FigletSettings
from .exceptions import (
    TermifigError,
    InvalidFormatError,
    FontNotFoundError,
    OutOfRangeError,
    ConfigurationError,
)

__all__ = [
    # Rendering
    "Figlet",
    "FigletSettings",
    "fig_ascii",
    # Fonts
    "Font",
    "FontHeader",
    "load_font",
    "parse_header",
    "read_font_lines",
    # Colors
    "colorize",
    "FONT_COLORS",
    "BACKGROUND_COLORS",
    # Errors
    "TermifigError",
    "InvalidFormatError",
    "FontNotFoundError",
    "OutOfRangeError",
    "ConfigurationError",
]
