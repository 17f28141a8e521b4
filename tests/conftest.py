"""Pytest configuration and fixtures."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset failfast loggers after each test so handlers do not leak."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == "failfast" or name.startswith("failfast."):
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.propagate = True


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Plain-text console writing into ``output``."""
    return Console(
        file=output,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        color_system=None,
    )
