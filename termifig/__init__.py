# termifig/__init__.py

"""
termifig: Render text as large ASCII-art banners using FIGlet fonts.

Public API:
- Figlet: Configurable rendering engine (font, font directory, stretching, colors)
- fig_ascii(): Generate a banner with the bundled font in one call
- colorize(): Wrap text in ANSI font/background color codes
- load_font() / parse_header(): Lower level access to FIGlet font files
"""

import logging

# Import complete public API from single source of truth
from .figlet_api import *

# Get package-level logger (the library configures no handlers)
logger = logging.getLogger("termifig")
