"""
Startup settings for the Mandelbrot explorer.

Settings are read from settings.json next to this module. A missing or
malformed default file is not fatal: a warning is logged and the
built-in defaults are used. Values that are present but invalid raise
SettingsError, which stops startup before a window is created.
"""

import json
import logging
import math
import os
from dataclasses import dataclass, fields, replace

from .palettes import DEFAULT_PALETTE_NAME, PALETTES

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')


class SettingsError(ValueError):
    """Raised when startup configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Validated startup configuration."""

    width: int = 1000
    height: int = 1000
    initial_iterations: int = 16
    detail_factor: float = 2.0
    max_iterations: int = 65536
    default_palette: str = DEFAULT_PALETTE_NAME
    export_path: str = "Mandelbrot.bmp"
    window_title: str = "Mandelbrot Set Explorer"

    def __post_init__(self):
        for name in ("width", "height", "initial_iterations", "max_iterations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise SettingsError(f"{name} must be a positive integer, got {value!r}")
        if self.max_iterations < self.initial_iterations:
            raise SettingsError(
                f"max_iterations ({self.max_iterations}) is below "
                f"initial_iterations ({self.initial_iterations})"
            )
        if isinstance(self.detail_factor, bool) or not isinstance(self.detail_factor, (int, float)) \
                or not math.isfinite(self.detail_factor) or self.detail_factor <= 1:
            raise SettingsError(
                f"detail_factor must be a finite number greater than 1, got {self.detail_factor!r}"
            )
        if self.default_palette not in PALETTES:
            raise SettingsError(
                f"Unknown palette {self.default_palette!r}, choose from {', '.join(PALETTES)}"
            )
        if not self.export_path:
            raise SettingsError("export_path must not be empty")

    @classmethod
    def from_dict(cls, data):
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    def with_dimensions(self, width, height):
        """Copy of these settings with a different buffer size."""
        return replace(self, width=width, height=height)


def load_settings(path=None):
    """
    Load settings from a JSON file.

    Args:
        path: Settings file to read. None reads the bundled settings.json,
            falling back to defaults if it is missing or unreadable.

    Returns:
        Settings instance

    Raises:
        SettingsError: if the file holds invalid values, or if an
            explicitly requested file cannot be read
    """
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if path is not None:
            raise SettingsError(f"Could not load {settings_path}: {e}") from e
        logger.warning("Could not load settings.json, using defaults: %s", e)
        return Settings()

    if not isinstance(data, dict):
        raise SettingsError(f"{settings_path} must contain a JSON object")
    return Settings.from_dict(data)
