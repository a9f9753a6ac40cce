"""Line-oriented reading of files and standard input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

STDIN_NAME = "-"

INPUT_ENCODING = "utf-8"
# Undecodable bytes survive as lone surrogates and are re-encoded on output
INPUT_ERRORS = "surrogateescape"


class InputReadError(Exception):
    """A named input could not be opened or read."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")


def iter_lines(paths: Iterable[str] = ()) -> Iterator[str]:
    """Yield lines, newline included, from each path in order.

    No paths, or a path of ``-``, reads standard input. Lines are split on
    ``\\n`` only, so ``\\r`` stays part of the text, and undecodable bytes
    are carried through as surrogates instead of being replaced.

    Raises:
        InputReadError: When a file cannot be opened or a read fails. The
            handle is closed before the error propagates.
    """
    for path in list(paths) or [STDIN_NAME]:
        logger.debug("Reading %s", "stdin" if path == STDIN_NAME else path)
        try:
            with click.open_file(path, "rb") as handle:
                for raw in handle:
                    yield raw.decode(INPUT_ENCODING, INPUT_ERRORS)
        except OSError as exc:
            raise InputReadError(path, exc) from exc


__all__ = ["INPUT_ENCODING", "INPUT_ERRORS", "STDIN_NAME", "InputReadError", "iter_lines"]
