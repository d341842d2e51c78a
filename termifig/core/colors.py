# termifig/core/colors.py

"""
ANSI colorization of rendered banners.

Colors are referred to by name; the names map to SGR parameters that are
wrapped around the whole text block, followed by a reset sequence.
"""

from typing import Dict, Optional

from ..exceptions import ConfigurationError

ESC = "\033["
RESET = "\033[0m"

FONT_COLORS: Dict[str, str] = {
    "red": "0;31",
    "cyan": "0;36",
    "blue": "0;34",
    "black": "0;30",
    "green": "0;32",
    "brown": "0;33",
    "white": "1;37",
    "purple": "0;35",
    "yellow": "1;33",
    "light_red": "1;31",
    "dark_gray": "1;30",
    "light_gray": "0;37",
    "light_cyan": "1;36",
    "light_blue": "1;34",
    "light_green": "1;32",
    "light_purple": "1;35",
}

BACKGROUND_COLORS: Dict[str, str] = {
    "red": "41",
    "cyan": "46",
    "blue": "44",
    "black": "40",
    "green": "42",
    "yellow": "43",
    "magenta": "45",
    "light_gray": "47",
}


def _color_code(color: str, table: Dict[str, str], kind: str, field: str) -> str:
    try:
        return f"{ESC}{table[color]}m"
    except KeyError:
        raise ConfigurationError(
            f"{kind} color '{color}' doesn't exist. "
            f"Available {kind.lower()} colors: {', '.join(table)}",
            field=field,
        ) from None


def colorize(text: str, font_color: Optional[str] = None, background_color: Optional[str] = None) -> str:
    """Wrap text in the escape codes for the given font and background colors."""
    if not font_color and not background_color:
        return text

    prefix = ""
    if font_color:
        prefix += _color_code(font_color, FONT_COLORS, "Font", "font_color")
    if background_color:
        prefix += _color_code(background_color, BACKGROUND_COLORS, "Background", "background_color")

    return f"{prefix}{text}{RESET}"
