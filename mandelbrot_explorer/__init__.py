"""
Mandelbrot Set Explorer Package

An interactive Mandelbrot set explorer using Pygame for display and
Numba for JIT-compiled rendering.

Quick Start:
    from mandelbrot_explorer import run
    run()

Or from command line:
    python -m mandelbrot_explorer [WIDTH HEIGHT]

Package Structure:
    - compute.py: JIT-compiled escape count, mapping and render kernels
    - geometry.py: Points, rectangles and pixel <-> complex mapping
    - palettes.py: Palette presets (OneDark, Nord, Gruvbox) and color mapping
    - renderer.py: Pixel buffer and the synchronous render pass
    - session.py: View state and the commands that change it
    - settings.py: Startup settings loaded from settings.json
    - app.py: Main application and event loop

Controls:
    - Click: Zoom into the region around the cursor
    - I: Double the iteration limit
    - 1 / 2 / 3: OneDark / Nord / Gruvbox palette
    - R: Reset to default view
    - P: Save the image as Mandelbrot.bmp
    - Q: Quit
"""

from .app import run, ExplorerApp
from .geometry import Point2D, Rectangle, pixel_to_complex, selection_around
from .palettes import PALETTES, Palette, color_for, get_palette, list_palette_names
from .renderer import PixelBuffer, escape_count, render
from .session import Command, Session, dispatch
from .settings import Settings, SettingsError, load_settings

__version__ = "1.0.0"
__all__ = [
    "run",
    "ExplorerApp",
    "Point2D",
    "Rectangle",
    "pixel_to_complex",
    "selection_around",
    "PALETTES",
    "Palette",
    "color_for",
    "get_palette",
    "list_palette_names",
    "PixelBuffer",
    "escape_count",
    "render",
    "Command",
    "Session",
    "dispatch",
    "Settings",
    "SettingsError",
    "load_settings",
]
