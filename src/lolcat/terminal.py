"""Terminal capability detection utilities."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from lolcat.constants import COLORTERM_ENV, TRUECOLOR_VALUES
from lolcat.limits import DEFAULT_COLUMNS

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import IO


def supports_truecolor(env: Mapping[str, str] | None = None) -> bool:
    """Check if the terminal advertises truecolor (24-bit colors).

    COLORTERM set to 'truecolor' or '24bit' (any case) enables it; anything
    else leaves the 256-color palette in use.

    Args:
        env: Environment to inspect. Defaults to ``os.environ``.

    Returns:
        True if truecolor is advertised, False otherwise.
    """
    if env is None:
        env = os.environ
    return env.get(COLORTERM_ENV, "").strip().lower() in TRUECOLOR_VALUES


def is_terminal(stream: IO[str] | None = None) -> bool:
    """Return True when the stream is attached to a terminal."""
    if stream is None:
        stream = sys.stdout
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def query_columns(stream: IO[str] | None = None) -> int:
    """Return the column count of the terminal behind the stream.

    Never raises: streams that are not terminals, closed streams and failed
    queries all report ``DEFAULT_COLUMNS``.
    """
    if stream is None:
        stream = sys.stdout
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return DEFAULT_COLUMNS
    return columns if columns > 0 else DEFAULT_COLUMNS


__all__ = ["is_terminal", "query_columns", "supports_truecolor"]
