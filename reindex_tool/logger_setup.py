"""
logger_setup.py - Logging Configuration

Console logging for the CLI and GUI. Per-entry reports are printed by the
CLI itself; logging carries diagnostics only.
"""

import logging
import sys


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Set up the package logger with one console handler on stderr

    Args:
        verbose: Log DEBUG and higher instead of INFO and higher

    Returns:
        The package logger
    """
    logger = logging.getLogger("reindex_tool")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Repeated calls (tests, GUI relaunch) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
