"""
Mandelbrot computation kernels using Numba JIT compilation.

This module contains the performance-critical functions of the explorer.
They operate on plain floats and integers so Numba can compile them in
nopython mode:
- Escape iteration count for a single point of the complex plane
- Linear mapping from a pixel index to the complex plane
- Palette index selection for an escape count
- The full render pass writing packed RGBA colors into a buffer

The value types (Point2D, Rectangle, Palette) live in geometry.py and
palettes.py, whose public functions unpack them and call these kernels.
"""

import math

import numpy as np
from numba import jit


ESCAPE_RADIUS_SQUARED = 4.0  # |z|^2 >= 4 means |z| >= 2, the point escapes


@jit(nopython=True, cache=True)
def escape_count_kernel(cr, ci, limit):
    """
    Count iterations of z = z² + c before z escapes.

    Starts from z = 0 and compares the squared magnitude against 4,
    so no square root is needed.

    Args:
        cr, ci: Real and imaginary parts of c
        limit: Maximum iteration count

    Returns:
        Number of iterations performed before escape, or limit if
        the point never escaped.
    """
    zr = 0.0
    zi = 0.0
    iteration = 0
    while iteration < limit and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        iteration += 1
    return iteration


@jit(nopython=True, cache=True)
def pixel_to_complex_kernel(px, py, x_min, y_min, x_max, y_max, width, height):
    """Map pixel (px, py) onto the viewport, sampling the top-left corner of the cell."""
    x = x_min + (px / width) * (x_max - x_min)
    y = y_min + (py / height) * (y_max - y_min)
    return x, y


@jit(nopython=True, cache=True)
def color_index_kernel(count, limit, num_colors):
    """
    Pick the palette index for an escape count.

    Index 0 is reserved for points that never escaped. Escaping points
    are spread over indices 1..num_colors-1, rounding half away from
    zero. Counts just below the limit round up to num_colors, so the
    result is clamped to the last entry.
    """
    if count == limit:
        return 0
    scaled = (num_colors - 1) * count / limit
    index = 1 + int(math.floor(scaled + 0.5))
    if index > num_colors - 1:
        index = num_colors - 1
    return index


@jit(nopython=True, cache=True)
def render_pass_kernel(out, x_min, y_min, x_max, y_max, limit, palette):
    """
    Fill every pixel of out with its palette color.

    Args:
        out: 2D uint32 array (height, width), modified in place
        x_min, y_min: Complex coordinates of the viewport's top-left corner
        x_max, y_max: Complex coordinates of the viewport's bottom-right corner
        limit: Maximum iteration count
        palette: 1D uint32 array of packed RGBA colors
    """
    height, width = out.shape
    num_colors = palette.shape[0]

    for py in range(height):
        for px in range(width):
            cr, ci = pixel_to_complex_kernel(
                px, py, x_min, y_min, x_max, y_max, width, height
            )
            count = escape_count_kernel(cr, ci, limit)
            out[py, px] = palette[color_index_kernel(count, limit, num_colors)]


def warmup_jit():
    """
    Warm up JIT compilation with a tiny dummy render.

    Call this once at startup so the first real render does not
    include compilation time.
    """
    dummy = np.zeros((4, 4), dtype=np.uint32)
    palette = np.zeros(8, dtype=np.uint32)
    render_pass_kernel(dummy, -2.0, -1.5, 1.0, 1.5, 4, palette)
