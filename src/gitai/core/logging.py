"""Logging setup for gitai.

All gitai loggers live under the ``gitai`` namespace so the CLI flags only
change gitai's own verbosity, never that of plugins or their libraries.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "gitai"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a logging level.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → WARNING
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Attach a stderr handler to the ``gitai`` logger and set its level.

    Safe to call more than once; the handler is installed only once.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    if not any(getattr(h, "_gitai_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gitai_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else ROOT_LOGGER_NAME)
