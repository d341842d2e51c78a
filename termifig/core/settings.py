# termifig/core/settings.py

"""
Configuration settings for termifig using Pydantic models.

Settings are plain data: nothing here touches the filesystem. Whether the
configured font actually exists is only checked when text is rendered.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .compositor import normalize_stretching
from .font import FONT_EXTENSION
from ..exceptions import ConfigurationError

DEFAULT_FONT = "termini"
DEFAULT_FONT_DIR = Path(__file__).parent.parent / "fonts"


class FigletSettings(BaseModel):
    """Rendering options for a Figlet engine."""
    model_config = ConfigDict(validate_assignment=True)

    font_name: str = DEFAULT_FONT
    font_dir: Path = Field(default_factory=lambda: DEFAULT_FONT_DIR)
    stretching: int = 0
    font_color: Optional[str] = None
    background_color: Optional[str] = None

    @field_validator('font_name', mode='before')
    @classmethod
    def validate_font_name(cls, v: Any) -> str:
        """Strip whitespace and a trailing .flf extension.

        An empty name is kept here and rejected when the font is loaded.
        """
        v = "" if v is None else str(v).strip()
        if v.lower().endswith(FONT_EXTENSION):
            v = v[:-len(FONT_EXTENSION)]
        return v

    @field_validator('stretching', mode='before')
    @classmethod
    def validate_stretching(cls, v: Any) -> int:
        return normalize_stretching(v)

    @field_validator('font_color', 'background_color', mode='before')
    @classmethod
    def validate_color(cls, v: Any) -> Optional[str]:
        """Normalize color tokens; an empty token means no color."""
        if v is None:
            return None
        v = str(v).strip().lower()
        return v or None


def build_settings(settings: Optional[FigletSettings], overrides: Dict[str, Any]) -> FigletSettings:
    """Build a settings object from the provided settings and overrides."""
    if settings is None:
        settings = FigletSettings()
    else:
        settings = settings.model_copy()

    for key, value in overrides.items():
        if key not in FigletSettings.model_fields:
            raise ConfigurationError(f"Unknown setting '{key}'", field=key)
        update_setting(settings, key, value)

    return settings


def update_setting(settings: FigletSettings, key: str, value: Any) -> None:
    """Assign a validated value, reporting failures as ConfigurationError."""
    try:
        setattr(settings, key, value)
    except ValidationError as e:
        raise ConfigurationError(str(e), field=key) from e
