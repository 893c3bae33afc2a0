"""
Synchronous Mandelbrot renderer.

The render pass fills a PixelBuffer from the current Session:
- Every pixel is mapped to the complex plane (geometry.pixel_to_complex)
- Its escape count is computed (escape_count)
- The count is turned into a palette color (palettes.color_for)

All three steps run inside a single Numba-compiled loop
(compute.render_pass_kernel). The buffer is locked for the whole pass
and is fully written before render() returns.
"""

import logging
import time
from contextlib import contextmanager

import numpy as np

from .compute import escape_count_kernel, render_pass_kernel
from .palettes import unpack_rgba

logger = logging.getLogger(__name__)


def escape_count(c, limit):
    """
    Escape iteration count of z = z² + c for a complex point.

    Args:
        c: Point2D with x = real part, y = imaginary part
        limit: Maximum iteration count (>= 0)

    Returns:
        Integer in [0, limit]; limit means the point never escaped
    """
    return int(escape_count_kernel(c.x, c.y, limit))


class PixelBuffer:
    """
    Fixed-size buffer of packed RGBA pixels, indexed [y, x].

    Writers go through lock(), which hands out the underlying array
    for the duration of a with-block and refuses nested locking.
    Readers (display, export) use pixel(), to_rgb() or copy().
    """

    def __init__(self, width, height):
        """
        Allocate a zeroed buffer.

        Args:
            width, height: Buffer dimensions in pixels, both > 0

        Raises:
            ValueError: if a dimension is not positive
            MemoryError: if the buffer cannot be allocated
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width), dtype=np.uint32)
        self._locked = False

    @property
    def locked(self):
        return self._locked

    @contextmanager
    def lock(self):
        """Exclusive write access to the pixel array."""
        if self._locked:
            raise RuntimeError("Pixel buffer is already locked")
        self._locked = True
        try:
            yield self._pixels
        finally:
            self._locked = False

    def pixel(self, x, y):
        """Packed RGBA color at (x, y)."""
        return int(self._pixels[y, x])

    def copy(self):
        """Snapshot of the pixels as a new (height, width) uint32 array."""
        return self._pixels.copy()

    def to_rgb(self):
        """
        Convert to an RGB image for display or export.

        Returns:
            (height, width, 3) uint8 array; the alpha channel is dropped
        """
        red, green, blue, _ = unpack_rgba(self._pixels)
        return np.dstack((red, green, blue)).astype(np.uint8)


def render(buffer, session):
    """
    Render the session's view into the buffer.

    Args:
        buffer: PixelBuffer to overwrite
        session: Session providing viewport, iteration limit and palette

    Raises:
        ValueError: if the buffer and session dimensions differ
    """
    if (buffer.width, buffer.height) != (session.width, session.height):
        raise ValueError(
            f"Buffer is {buffer.width}x{buffer.height} but session maps "
            f"{session.width}x{session.height}"
        )

    viewport = session.viewport
    palette = session.active_palette.to_array()

    start = time.perf_counter()
    with buffer.lock() as pixels:
        render_pass_kernel(
            pixels,
            viewport.top_left.x, viewport.top_left.y,
            viewport.bottom_right.x, viewport.bottom_right.y,
            session.iteration_limit,
            palette
        )
    logger.debug(
        "Rendered %dx%d at %d iterations in %.3fs",
        buffer.width, buffer.height, session.iteration_limit,
        time.perf_counter() - start
    )
