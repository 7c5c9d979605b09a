"""Shared fixtures for the test-suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fullname_parser.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by ``configure_logging``."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
