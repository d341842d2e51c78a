# termifig/core/ascii_utils.py

"""
ASCII art banner helper for termifig.

This module provides a one-call way to turn a short string into a banner
using the bundled font, for titles and log decoration.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .engine import Figlet
from ..exceptions import TermifigError

logger = logging.getLogger("termifig")


def fig_ascii(
    text: str,
    font: Optional[str] = None,
    font_dir: Optional[Union[str, Path]] = None,
) -> Optional[str]:
    """
    Generate an ASCII art banner from text.

    Args:
        text: The text to convert to ASCII art
        font: Font name, defaults to the bundled font
        font_dir: Directory holding the font file, defaults to the bundled fonts

    Returns:
        ASCII art string with trailing whitespace removed, or None if generation fails

    Example:
        ```python
        from termifig import fig_ascii

        banner = fig_ascii("HELLO")
        if banner:
            print(banner)
        ```
    """
    if not text:
        return None

    overrides = {}
    if font is not None:
        overrides["font_name"] = font
    if font_dir is not None:
        overrides["font_dir"] = font_dir

    try:
        ascii_text = Figlet(**overrides).render(text)
    except TermifigError as e:
        logger.warning(f"Failed to generate ASCII art: {e}")
        return None

    logger.debug(f"Generated ASCII art for text: {text}")

    # Remove ALL trailing whitespace and newlines
    return ascii_text.rstrip()
