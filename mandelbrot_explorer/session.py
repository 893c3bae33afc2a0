"""
View state of the explorer and the commands that change it.

The Session is the only mutable state of the program besides the pixel
buffer. Command handlers mutate it in place; after every successful
change the caller runs one full render pass before handling the next
input event.
"""

import enum
import logging
import math

from .geometry import DEFAULT_VIEWPORT, Rectangle, pixel_to_complex, selection_around
from .palettes import get_default_palette, get_palette

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """User commands understood by the explorer."""

    ZOOM = "zoom"
    RESET = "reset"
    INCREASE_DETAIL = "increase_detail"
    SELECT_PALETTE = "select_palette"
    SAVE = "save"
    QUIT = "quit"


class Session:
    """
    Current view of the Mandelbrot set.

    Attributes:
        width, height: Pixel buffer dimensions the view is mapped onto
        viewport: Rectangle of the complex plane currently displayed
        pending_selection: Last pixel-space zoom selection, or None
        iteration_limit: Current maximum iteration count
        initial_iteration_limit: Iteration count restored by reset_view
        active_palette: Palette used for coloring
    """

    DEFAULT_ITERATIONS = 16
    DETAIL_FACTOR = 2.0  # Iteration limit multiplier for increase_detail
    MAX_ITERATIONS = 65536  # Keeps a single render pass bounded

    def __init__(self, width, height, iteration_limit=None, palette=None,
                 detail_factor=None, max_iterations=None):
        """
        Initialize the session at the canonical view.

        Args:
            width, height: Buffer dimensions in pixels, both > 0
            iteration_limit: Starting iteration count (default 16)
            palette: Starting Palette (default OneDark)
            detail_factor: Multiplier applied by increase_detail (default 2)
            max_iterations: Upper bound for increase_detail (default 65536)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Session dimensions must be positive, got {width}x{height}")
        if iteration_limit is None:
            iteration_limit = self.DEFAULT_ITERATIONS
        if iteration_limit <= 0:
            raise ValueError(f"Iteration limit must be positive, got {iteration_limit}")
        self.width = width
        self.height = height
        self._initial_iteration_limit = iteration_limit
        self.detail_factor = detail_factor or self.DETAIL_FACTOR
        self.max_iterations = max(max_iterations or self.MAX_ITERATIONS,
                                  self._initial_iteration_limit)

        self.viewport = DEFAULT_VIEWPORT
        self.pending_selection = None
        self.iteration_limit = self._initial_iteration_limit
        self.active_palette = palette or get_default_palette()

    @classmethod
    def from_settings(cls, settings):
        """Create a session from a Settings instance."""
        return cls(
            settings.width, settings.height,
            iteration_limit=settings.initial_iterations,
            palette=get_palette(settings.default_palette),
            detail_factor=settings.detail_factor,
            max_iterations=settings.max_iterations,
        )

    @property
    def initial_iteration_limit(self):
        return self._initial_iteration_limit

    def select_region(self, click):
        """
        Zoom into the region around a clicked pixel.

        The selection spans a third of the buffer on each side of the
        click, clamped to the buffer, and becomes the new viewport.

        Args:
            click: Point2D in pixel space

        Returns:
            True if the viewport changed, False if the selection or the
            zoomed viewport had no area (the view is left as it was)
        """
        selection = selection_around(click, self.width, self.height)
        if selection.is_degenerate:
            logger.warning("Ignoring zero-area selection %s around %s", selection, click)
            return False

        viewport = Rectangle(
            pixel_to_complex(selection.top_left, self.viewport, self.width, self.height),
            pixel_to_complex(selection.bottom_right, self.viewport, self.width, self.height),
        )
        if viewport.is_degenerate:
            # float64 can no longer tell the corners apart
            logger.warning("Zoom limit reached, ignoring selection around %s", click)
            return False

        self.pending_selection = selection
        self.viewport = viewport
        logger.debug("Zoomed to %s", self.viewport)
        return True

    def reset_view(self):
        """Return to the canonical viewport and the initial iteration limit."""
        self.viewport = DEFAULT_VIEWPORT
        self.pending_selection = None
        self.iteration_limit = self._initial_iteration_limit
        return True

    def increase_detail(self):
        """
        Multiply the iteration limit by the detail factor.

        The limit grows by at least one per call and never exceeds
        max_iterations.

        Returns:
            True if the limit changed, False if it was already at the cap
        """
        if self.iteration_limit >= self.max_iterations:
            logger.warning("Iteration limit already at maximum (%d)", self.max_iterations)
            return False
        scaled = int(math.floor(self.iteration_limit * self.detail_factor + 0.5))
        self.iteration_limit = min(max(scaled, self.iteration_limit + 1), self.max_iterations)
        logger.info("Iteration limit set to %d", self.iteration_limit)
        return True

    def select_palette(self, name):
        """
        Switch to a named palette preset.

        Raises:
            KeyError if name is not a known palette
        """
        self.active_palette = get_palette(name)
        return True


def dispatch(session, command, argument=None):
    """
    Apply a session command.

    Args:
        session: Session to mutate
        command: Command member; SAVE and QUIT are handled by the app
        argument: Click Point2D for ZOOM, palette name for SELECT_PALETTE

    Returns:
        True if the session changed and the buffer must be re-rendered
    """
    if command is Command.ZOOM:
        return session.select_region(argument)
    elif command is Command.RESET:
        return session.reset_view()
    elif command is Command.INCREASE_DETAIL:
        return session.increase_detail()
    elif command is Command.SELECT_PALETTE:
        return session.select_palette(argument)
    raise ValueError(f"{command} is not a session command")
