# termifig/core/engine.py

"""
Rendering engine for termifig.

The Figlet class owns the configuration, keeps every font it has loaded and
drives the pipeline: font loading, glyph lookup, composition and optional
colorization. Configuration setters return the engine so calls can be
chained:

    Figlet().set_font("termini").set_font_stretching(1).write("Hello")

An engine is not thread safe; share one between threads only with external
locking.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Union

from .colors import colorize as ansi_colorize
from .compositor import compose
from .font import Font, ReadLines, load_font, read_font_lines
from .glyphs import Glyph, GlyphCache
from .settings import FigletSettings, build_settings, update_setting
from ..exceptions import ConfigurationError

logger = logging.getLogger("termifig")

Colorizer = Callable[[str, Optional[str], Optional[str]], str]


class Figlet:
    """Render text as multi-line ASCII art using FIGlet fonts."""

    def __init__(
        self,
        settings: Optional[FigletSettings] = None,
        read_lines: Optional[ReadLines] = None,
        colorizer: Optional[Colorizer] = None,
        **overrides,
    ):
        self.settings = build_settings(settings, overrides)
        self.read_lines = read_lines or read_font_lines
        self.colorizer = colorizer or ansi_colorize
        self._fonts: Dict[str, Font] = {}
        self._glyphs = GlyphCache()
        self._font_name: Optional[str] = None

    ############################################################################
    # Configuration
    ############################################################################

    def set_font(self, font_name: str) -> "Figlet":
        update_setting(self.settings, "font_name", font_name)
        return self

    def set_font_dir(self, font_dir: Union[str, Path]) -> "Figlet":
        """Point the engine at another font directory.

        Fonts already loaded are dropped since the same name may now refer
        to a different file.
        """
        previous = self.settings.font_dir
        update_setting(self.settings, "font_dir", font_dir)
        if self.settings.font_dir != previous:
            self.clear()
        return self

    def set_font_stretching(self, stretching) -> "Figlet":
        update_setting(self.settings, "stretching", stretching)
        return self

    def set_font_color(self, color: Optional[str]) -> "Figlet":
        update_setting(self.settings, "font_color", color)
        return self

    def set_background_color(self, color: Optional[str]) -> "Figlet":
        update_setting(self.settings, "background_color", color)
        return self

    ############################################################################
    # Rendering
    ############################################################################

    @property
    def font(self) -> Optional[Font]:
        """The font used by the most recent render, if any."""
        if self._font_name is None:
            return None
        return self._fonts.get(self._font_name)

    def render(self, text: str) -> str:
        """Return text rendered in the configured font and colors."""
        font = self._load_font()
        glyphs = self._glyphs_for(font, text)
        figlet_text = compose(glyphs, font.height, self.settings.stretching)

        if self.settings.font_color or self.settings.background_color:
            figlet_text = self.colorizer(
                figlet_text,
                self.settings.font_color,
                self.settings.background_color,
            )

        return figlet_text

    def write(self, text: str, file: Optional[TextIO] = None) -> "Figlet":
        """Render text and write it, followed by a newline, to file or stdout."""
        out = file if file is not None else sys.stdout
        out.write(self.render(text) + "\n")
        out.flush()
        return self

    def clear(self) -> None:
        """Forget all loaded fonts and cached glyphs."""
        self._glyphs.clear()
        self._fonts.clear()
        self._font_name = None

    def _load_font(self) -> Font:
        font_name = self.settings.font_name
        if not font_name:
            raise ConfigurationError("Font name must be a non-empty string", field="font_name")

        font = self._fonts.get(font_name)
        if font is None:
            font = load_font(font_name, self.settings.font_dir, self.read_lines)
            self._fonts[font_name] = font
        self._font_name = font_name
        return font

    def _glyphs_for(self, font: Font, text: str) -> List[Glyph]:
        return [self._glyphs.get(font, character) for character in text]
