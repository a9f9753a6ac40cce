"""Diagnostic logging on stderr, off unless requested."""

from __future__ import annotations

import logging
import sys

from lolcat.limits import DEBUG_ENABLED

LOGGER_NAME = "lolcat"

_logging_initialized: bool = False


def setup_logging(enabled: bool = DEBUG_ENABLED) -> None:
    """Attach a handler to the package logger.

    Enabled logging goes to stderr at DEBUG level so it never mixes with the
    colored stream on stdout. Disabled logging gets a NullHandler. This is
    idempotent - calling it again has no effect after the first call.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    package_logger = logging.getLogger(LOGGER_NAME)
    if enabled:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)

    _logging_initialized = True

    if enabled:
        package_logger.debug("Debug logging initialized")


def reset_logging() -> None:
    """Remove handlers added by setup_logging()."""
    global _logging_initialized

    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    _logging_initialized = False


__all__ = ["LOGGER_NAME", "reset_logging", "setup_logging"]
