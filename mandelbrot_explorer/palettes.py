"""
Palette definitions for Mandelbrot visualization.

Each palette holds exactly NUM_COLORS colors packed as 32-bit RGBA
integers (0xRRGGBBAA):
- Index 0 is the interior color, used for points that never escape
- Indices 1..7 run from "escapes fastest" to "escapes slowest"

To add a new palette:
1. Define a PALETTE_XXX constant with eight colors
2. Add it to the PALETTES dictionary at the bottom of this file
"""

from dataclasses import dataclass

import numpy as np

from .compute import color_index_kernel


NUM_COLORS = 8  # Interior color + 7 gradient steps


@dataclass(frozen=True)
class Palette:
    """An immutable, named sequence of NUM_COLORS packed RGBA colors."""

    name: str
    colors: tuple

    def __post_init__(self):
        object.__setattr__(self, "colors", tuple(int(c) for c in self.colors))
        if len(self.colors) != NUM_COLORS:
            raise ValueError(
                f"Palette {self.name!r} has {len(self.colors)} colors, expected {NUM_COLORS}"
            )

    def __getitem__(self, index):
        return self.colors[index]

    def __len__(self):
        return len(self.colors)

    @property
    def interior(self):
        return self.colors[0]

    def to_array(self):
        """Colors as a uint32 numpy array, the form the render kernel takes."""
        return np.array(self.colors, dtype=np.uint32)


def unpack_rgba(color):
    """
    Split packed 0xRRGGBBAA colors into an (r, g, b, a) tuple.

    Works on a single integer or element-wise on a numpy array.
    """
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def color_for(escape_count, iteration_limit, palette):
    """
    Color for a pixel with the given escape count.

    Points that reached the iteration limit get the interior color.
    Others are spread over the gradient entries proportionally to
    escape_count / iteration_limit.

    Args:
        escape_count: Result of escape_count, 0 <= escape_count <= iteration_limit
        iteration_limit: Iteration limit used for the computation
        palette: Palette to pick from

    Returns:
        Packed RGBA color
    """
    return palette[color_index_kernel(escape_count, iteration_limit, len(palette))]


# Atom One Dark
PALETTE_ONEDARK = Palette("OneDark", (
    0x282c34ff,
    0xabb2bfff,
    0xe06c75ff,
    0xe5c07bff,
    0x98c379ff,
    0x56b6c2ff,
    0x61afefff,
    0xc678ddff,
))

# Nord
PALETTE_NORD = Palette("Nord", (
    0x2e3440ff,
    0xe5e9f0ff,
    0xa3be8cff,
    0x8fbcbbff,
    0x88c0d0ff,
    0x81a1c1ff,
    0x5e81acff,
    0xb48eadff,
))

# Gruvbox dark
PALETTE_GRUVBOX = Palette("Gruvbox", (
    0x282828ff,
    0xebdbb2ff,
    0xfb4934ff,
    0xfe8019ff,
    0xfabd2fff,
    0xb8bb26ff,
    0x83a598ff,
    0xd3869bff,
))


# Registry of all available palettes.
# Keys are display names; add new palettes here to make them selectable.
PALETTES = {
    palette.name: palette
    for palette in (PALETTE_ONEDARK, PALETTE_NORD, PALETTE_GRUVBOX)
}

DEFAULT_PALETTE_NAME = "OneDark"


def get_palette(name):
    """
    Get a palette by name.

    Raises:
        KeyError if name not found
    """
    return PALETTES[name]


def get_default_palette():
    """Get the default palette (OneDark)."""
    return PALETTES[DEFAULT_PALETTE_NAME]


def list_palette_names():
    """Get list of available palette names, in key order."""
    return list(PALETTES.keys())
