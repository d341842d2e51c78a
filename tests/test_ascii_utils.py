# tests/test_ascii_utils.py

"""Tests for the fig_ascii banner helper."""

import logging

from termifig import fig_ascii


class TestFigAscii:
    """Test one-call banner generation."""

    def test_bundled_font(self):
        assert fig_ascii("Hi") == "    ___ \n|_|  |  \n| | _|_"

    def test_trailing_whitespace_removed(self):
        banner = fig_ascii("A ")
        # Only the end of the block is stripped; inner rows keep their width
        assert banner == " _    \n|_|   \n| |"

    def test_empty_text(self):
        assert fig_ascii("") is None

    def test_custom_font(self, font_dir):
        assert fig_ascii("AB", font="blocky", font_dir=font_dir) == " /\\ |~)\n/--\\|_)"

    def test_missing_font_returns_none(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="termifig"):
            assert fig_ascii("Hi", font="nope", font_dir=tmp_path) is None
        assert "Failed to generate ASCII art" in caplog.text

    def test_unsupported_character_returns_none(self):
        assert fig_ascii("café") is None
