"""Logging utilities for repo-spy."""

from __future__ import annotations

import logging

_LOGGER_NAME = "repo_spy"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repo_spy hierarchy."""
    if name and not name.startswith(_LOGGER_NAME):
        name = f"{_LOGGER_NAME}.{name}"
    return logging.getLogger(name or _LOGGER_NAME)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send repo_spy logs to stderr; DEBUG when verbose, else INFO."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated calls (tests, re-entry) don't duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[repo-spy] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
