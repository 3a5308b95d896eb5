"""Logging configuration for the playlistexport package."""

import logging
import sys


def configure_logging(debug: bool = False):
    """Configure logging for the package.

    Diagnostics go to stderr so that stream output on stdout stays clean.

    Args:
        debug: Whether to log at DEBUG level
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Force reconfiguration to avoid duplicates
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
