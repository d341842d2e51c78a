# tests/test_settings.py

"""Tests for the settings model."""

from pathlib import Path

import pytest

from termifig.core.settings import (
    DEFAULT_FONT,
    DEFAULT_FONT_DIR,
    FigletSettings,
    build_settings,
    update_setting,
)
from termifig.exceptions import ConfigurationError


class TestFigletSettings:
    """Test FigletSettings validation."""

    def test_defaults(self):
        settings = FigletSettings()
        assert settings.font_name == DEFAULT_FONT
        assert settings.font_dir == DEFAULT_FONT_DIR
        assert settings.stretching == 0
        assert settings.font_color is None
        assert settings.background_color is None

    def test_bundled_font_exists(self):
        assert (DEFAULT_FONT_DIR / f"{DEFAULT_FONT}.flf").is_file()

    def test_extension_stripped(self):
        assert FigletSettings(font_name="standard.flf").font_name == "standard"

    @pytest.mark.parametrize("name,expected", [
        ("", ""),
        ("   ", ""),
        (None, ""),
        (42, "42"),
        (" big.FLF ", "big"),
    ])
    def test_font_name_normalized_without_validation(self, name, expected):
        """Font names are only normalized; emptiness is checked at load time."""
        assert FigletSettings(font_name=name).font_name == expected

    def test_font_dir_from_string(self, tmp_path):
        settings = FigletSettings(font_dir=str(tmp_path))
        assert settings.font_dir == Path(tmp_path)

    def test_font_dir_need_not_exist(self):
        settings = FigletSettings(font_dir="/nonexistent/fonts")
        assert settings.font_dir == Path("/nonexistent/fonts")

    def test_stretching_normalized_on_assignment(self):
        settings = FigletSettings()
        settings.stretching = "3"
        assert settings.stretching == 3
        settings.stretching = -2
        assert settings.stretching == 0
        settings.stretching = "wide"
        assert settings.stretching == 0

    def test_colors_normalized(self):
        settings = FigletSettings(font_color="  Light_Blue ", background_color="")
        assert settings.font_color == "light_blue"
        assert settings.background_color is None


class TestBuildSettings:
    """Test building settings from a base object and overrides."""

    def test_overrides_applied(self):
        settings = build_settings(None, {"font_name": "big", "stretching": 2})
        assert settings.font_name == "big"
        assert settings.stretching == 2

    def test_base_not_mutated(self):
        base = FigletSettings(font_name="big")
        settings = build_settings(base, {"font_name": "small"})
        assert settings.font_name == "small"
        assert base.font_name == "big"

    def test_unknown_setting(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_settings(None, {"font_size": 12})
        assert exc_info.value.field == "font_size"

    def test_type_errors_become_configuration_errors(self):
        settings = FigletSettings()
        with pytest.raises(ConfigurationError) as exc_info:
            update_setting(settings, "font_dir", ["not", "a", "path"])
        assert exc_info.value.field == "font_dir"
