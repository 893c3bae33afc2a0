"""Points, rectangles and the mapping between pixel space and the complex plane."""

from dataclasses import dataclass

from .compute import pixel_to_complex_kernel


@dataclass(frozen=True)
class Point2D:
    """A pixel coordinate, or a complex number as (real, imaginary)."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle given by its top-left and bottom-right corners.

    Used both for pixel-space selections and complex-plane viewports.
    The corners must be ordered on both axes; a zero-sized side is allowed.
    """

    top_left: Point2D
    bottom_right: Point2D

    def __post_init__(self):
        if self.top_left.x > self.bottom_right.x or self.top_left.y > self.bottom_right.y:
            raise ValueError(
                f"Rectangle corners out of order: {self.top_left} > {self.bottom_right}"
            )

    @classmethod
    def clamped(cls, left, top, right, bottom, width, height):
        """Build a pixel-space rectangle with every edge clamped to [0, width] x [0, height]."""
        return cls(
            Point2D(min(max(left, 0), width), min(max(top, 0), height)),
            Point2D(min(max(right, 0), width), min(max(bottom, 0), height)),
        )

    @property
    def width(self):
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self):
        return self.bottom_right.y - self.top_left.y

    @property
    def is_degenerate(self):
        """True when the rectangle has no area."""
        return self.width == 0 or self.height == 0


# Canonical view: real in [-2, 1], imaginary in [-1.5, 1.5]
DEFAULT_VIEWPORT = Rectangle(Point2D(-2.0, -1.5), Point2D(1.0, 1.5))


def pixel_to_complex(pixel, viewport, width, height):
    """
    Convert a pixel coordinate to a point of the complex plane.

    Each axis is interpolated linearly across the viewport. Pixel
    (0, 0) maps exactly to viewport.top_left.

    Args:
        pixel: Point2D in pixel space
        viewport: Rectangle in the complex plane
        width, height: Buffer dimensions in pixels, both > 0

    Returns:
        Point2D with x = real part, y = imaginary part
    """
    x, y = pixel_to_complex_kernel(
        pixel.x, pixel.y,
        viewport.top_left.x, viewport.top_left.y,
        viewport.bottom_right.x, viewport.bottom_right.y,
        width, height
    )
    return Point2D(x, y)


def selection_around(click, width, height):
    """
    Pixel-space zoom selection centered on a click.

    Extends a third of the buffer size in each direction from the click
    (integer division) and clamps to the buffer, so a click in a corner
    yields a smaller, off-center selection.
    """
    dx = width // 3
    dy = height // 3
    return Rectangle.clamped(
        click.x - dx, click.y - dy,
        click.x + dx, click.y + dy,
        width, height
    )
