"""Numeric limits and bounds - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_enabled() -> bool:
    """Check whether debug logging is requested.

    Debug mode is enabled when LOLCAT_DEBUG is set to "1" or "true".
    Any other value (or no value) leaves it disabled.
    """
    env_debug = os.environ.get("LOLCAT_DEBUG", "").lower()
    return env_debug in ("1", "true")


DEBUG_ENABLED: bool = _is_debug_enabled()
"""True when LOLCAT_DEBUG asks for diagnostic logging on stderr."""


MIN_SPREAD = 0.1
MIN_DURATION = 1
MIN_SPEED = 0.1


DEFAULT_COLUMNS = 80


# Longest sequence is "\x1b[48;2;255;255;255m" (19 chars)
ESCAPE_BUFFER_SIZE = 32
