"""
Main application module for the Mandelbrot explorer.

Contains the ExplorerApp class which handles:
- Window setup and main loop
- Mapping mouse and keyboard input to session commands
- Rendering after every command and blitting to the window
- Saving the current buffer as a bitmap
"""

import logging

import numpy as np
import pygame

from .compute import warmup_jit
from .geometry import Point2D
from .renderer import PixelBuffer, render
from .session import Command, Session, dispatch
from .settings import Settings

logger = logging.getLogger(__name__)


class ExplorerApp:
    """
    Main application class for the Mandelbrot explorer.

    Owns the pygame window, the Session and the PixelBuffer. Every
    event is handled to completion, including its re-render, before
    the next one is read.
    """

    # Keyboard shortcuts: key -> (command, argument)
    KEY_COMMANDS = {
        pygame.K_q: (Command.QUIT, None),
        pygame.K_p: (Command.SAVE, None),
        pygame.K_r: (Command.RESET, None),
        pygame.K_i: (Command.INCREASE_DETAIL, None),
        pygame.K_1: (Command.SELECT_PALETTE, "OneDark"),
        pygame.K_2: (Command.SELECT_PALETTE, "Nord"),
        pygame.K_3: (Command.SELECT_PALETTE, "Gruvbox"),
    }

    def __init__(self, settings=None):
        """
        Initialize the application.

        Args:
            settings: Settings instance (default: built-in defaults)
        """
        self.settings = settings or Settings()
        self.width = self.settings.width
        self.height = self.settings.height

        self.session = Session.from_settings(self.settings)
        self.buffer = PixelBuffer(self.width, self.height)

        # Pygame state (initialized in run())
        self.screen = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self.start()
        self.running = True
        try:
            while self.running:
                self.handle_event(pygame.event.wait())
        finally:
            pygame.quit()

    def start(self):
        """Create the window and draw the initial view."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(f"{self.settings.window_title} - compiling...")
        warmup_jit()
        self.refresh()

    def handle_event(self, event):
        """Process a single pygame event."""
        if event.type == pygame.QUIT:
            self.execute(Command.QUIT)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.execute(Command.ZOOM, Point2D(*event.pos))
        elif event.type == pygame.KEYDOWN and event.key in self.KEY_COMMANDS:
            self.execute(*self.KEY_COMMANDS[event.key])

    def execute(self, command, argument=None):
        """
        Run a command, re-rendering if it changed the session.

        Args:
            command: Command member
            argument: Click Point2D for ZOOM, palette name for SELECT_PALETTE
        """
        if command is Command.QUIT:
            logger.info("Closing...")
            self.running = False
        elif command is Command.SAVE:
            self.save_image()
        elif dispatch(self.session, command, argument):
            self.refresh()

    def refresh(self):
        """Render the session into the buffer and show it."""
        render(self.buffer, self.session)
        self._update_caption()
        self._draw()

    def save_image(self, path=None):
        """
        Save the current buffer as an image file.

        The format follows the file extension (bitmap by default).
        Failures are logged and do not end the session.

        Returns:
            True if the file was written
        """
        filename = path or self.settings.export_path
        try:
            pygame.image.save(self._make_surface(), filename)
        except (pygame.error, OSError) as e:
            logger.error("Could not save screenshot to %s: %s", filename, e)
            return False
        logger.info("Saved screenshot as %s", filename)
        return True

    def _make_surface(self):
        # surfarray expects (width, height, 3)
        return pygame.surfarray.make_surface(np.ascontiguousarray(
            self.buffer.to_rgb().swapaxes(0, 1)
        ))

    def _draw(self):
        """Blit the buffer to the window."""
        if self.screen is None:
            return
        self.screen.blit(self._make_surface(), (0, 0))
        pygame.display.flip()

    def _update_caption(self):
        if self.screen is None:
            return
        pygame.display.set_caption(
            f"{self.settings.window_title} - {self.session.iteration_limit} iterations, "
            f"{self.session.active_palette.name} - click to zoom, R to reset"
        )


def run(settings=None):
    """
    Run the Mandelbrot explorer.

    Args:
        settings: Settings instance (default: built-in defaults)
    """
    app = ExplorerApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
