"""Logging utilities for the eurofxref package."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "eurofxref"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a logger, configuring the root handler on first use."""

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return logging.getLogger(name)


def enable_debug_logging() -> None:
    """Surface cache and parser decisions logged at DEBUG level."""

    get_logger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "enable_debug_logging", "get_logger"]
