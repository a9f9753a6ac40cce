"""Static rainbow coloring, one escape sequence per character."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lolcat.color import colorize
from lolcat.constants import ESC_RESET

if TYPE_CHECKING:
    from typing import IO

    from lolcat.runtime import RuntimeState

logger = logging.getLogger(__name__)


def render_plain(text: str, state: RuntimeState, out: IO[str]) -> None:
    """Color ``text`` character by character and write it to ``out``.

    The horizontal position lives in ``state`` so a line delivered across
    several calls keeps a continuous band. When ``state.terminate`` is set
    the call stops before the next character and writes what it has. The
    colored prefix is also written when the loop is left by an exception.
    """
    chunks: list[str] = []
    try:
        for char in text:
            if state.terminate:
                logger.debug("Terminate requested at line %d", state.line_count)
                break
            if state.char_count == 0:
                state.advance_line()
            if char == "\n":
                chunks.append(ESC_RESET)
                chunks.append(char)
                state.char_count = 0
                continue
            chunks.append(
                colorize(
                    state.line_base,
                    state.freq,
                    state.char_count * state.spread_inverse,
                    state.depth,
                    state.invert,
                )
            )
            chunks.append(char)
            state.char_count += 1
    finally:
        out.write("".join(chunks))
