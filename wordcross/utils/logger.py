"""Logging utilities tailored for word-cross building."""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "wordcross"


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the package logger.

    A build may run hundreds of discarded attempts, so per-attempt chatter
    stays at DEBUG while sizing changes and final results go out at INFO.
    The root logger is left alone for the embedding application.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers.clear()
    package.addHandler(handler)
    package.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordcross`` namespace.

    Names outside the namespace (``__main__`` for instance) are nested under
    it so that they share the package handler.
    """

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
