"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Allow an optional verbose/debug mode for the command line interface.

Notes/Edge cases:
    - As a library the package stays silent by default: the root package
      logger carries a :class:`logging.NullHandler`.
    - :func:`configure_logging` is idempotent; calling it twice does not
      duplicate handlers.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "fullname_parser"

_HANDLER_NAME = "fullname_parser.stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` lowers the level to ``DEBUG`` so per-pass parse traces are
    emitted; otherwise only ``INFO`` and above are shown.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    elif isinstance(handler, logging.StreamHandler):
        handler.setStream(sys.stderr)
    handler.setLevel(level)
    root.setLevel(level)
    return root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
