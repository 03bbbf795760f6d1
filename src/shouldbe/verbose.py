"""Trace logging configuration for assertion debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None, verbose: bool = False, logger_name: str = "shouldbe"
) -> logging.Logger:
    """
    Configure and return the logger that records assertion traces.

    Writes to debug_file when one is given. Optionally also writes to
    stderr if verbose=True.

    Args:
        debug_file: Path to the trace log file, or None for no file output
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. Module loggers inside the
            package propagate to "shouldbe".

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Drop handlers from an earlier configure() call
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
