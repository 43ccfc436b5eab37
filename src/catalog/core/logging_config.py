"""Logging setup for the ``catalog`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches a single console handler to the package root logger so that all
``catalog.*`` records share one format.
"""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "catalog"

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``catalog`` logger and return it.

    Calling this repeatedly (e.g. once per app instance in tests) replaces the
    handler instead of stacking duplicates. Records do not propagate to the
    root logger, so they are not printed twice under a root handler.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(_handler)
    return logger
