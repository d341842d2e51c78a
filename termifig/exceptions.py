# termifig/exceptions.py

"""
Custom exceptions for the termifig package.

These exceptions cover the failure cases that may occur while loading a
FIGlet font file and rendering text with it.
"""

class TermifigError(Exception):
    """Base exception for all termifig errors."""

class InvalidFormatError(TermifigError):
    """Raised when a font file header cannot be parsed."""
    def __init__(self, font_name: str = None, message: str = None):
        msg = "Invalid font format"
        if font_name:
            msg = f"{msg} in '{font_name}'"
        if message:
            msg = f"{msg}: {message}"
        super().__init__(msg)
        self.font_name = font_name

class FontNotFoundError(TermifigError):
    """Raised when the font file does not exist on disk."""
    def __init__(self, path: str, message: str = None):
        super().__init__(
            f"Could not open font file '{path}': {message or 'file not found'}"
        )
        self.path = path

class OutOfRangeError(TermifigError):
    """Raised when a character has no glyph in the font."""
    def __init__(self, character: str = None, message: str = None):
        msg = "Character out of range"
        if character is not None:
            msg = f"{msg} {character!r}"
        if message:
            msg = f"{msg}: {message}"
        super().__init__(msg)
        self.character = character

class ConfigurationError(TermifigError):
    """Raised when there are issues with the provided configuration."""
    def __init__(self, message: str, field: str = None):
        msg = "Configuration error"
        if field:
            msg = f"{msg} in '{field}'"
        msg = f"{msg}: {message}"
        super().__init__(msg)
        self.field = field
