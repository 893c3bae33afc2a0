"""
Command line entry point: python -m mandelbrot_explorer [WIDTH HEIGHT]
"""

import argparse
import logging
import sys

import pygame

from .app import run
from .settings import SettingsError, load_settings

logger = logging.getLogger("mandelbrot_explorer")


def setup_logging(verbose=False):
    """Configures a console logger for the application."""
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger


def positive_int(value):
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mandelbrot-explorer",
        description="Interactive Mandelbrot set explorer. Click to zoom, "
                    "I for more iterations, 1/2/3 for palettes, R to reset, "
                    "P to save, Q to quit.",
    )
    parser.add_argument(
        "dims",
        type=positive_int,
        nargs="*",
        metavar="WIDTH HEIGHT",
        help="window size in pixels (default from settings, 1000 1000)",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        default=None,
        help="JSON settings file to use instead of the bundled settings.json",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def parse_args(argv=None):
    """Parse and validate command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.dims) not in (0, 2):
        parser.error("expected either no dimensions or both WIDTH and HEIGHT")
    return args


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.settings_path)
        if args.dims:
            settings = settings.with_dimensions(*args.dims)
    except SettingsError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("Starting explorer at %dx%d", settings.width, settings.height)
    try:
        run(settings)
    except (pygame.error, MemoryError) as e:
        logger.error("Could not create the display: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
