"""Console logging for the demos."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "promiselab"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send promiselab log records to stderr as bare messages.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_promiselab", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._promiselab = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
