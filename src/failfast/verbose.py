"""Logging configuration for runner debug output."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_logger(
    verbose: bool = False,
    logger_name: str = "failfast",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return the logger used for runner debug output.

    Args:
        verbose: If True, DEBUG records are written to ``stream``. If False,
            the logger only carries a NullHandler.
        logger_name: Name of the logger instance.
        stream: Destination for records; defaults to standard output.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not verbose:
        logger.addHandler(logging.NullHandler())
        return logger

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
