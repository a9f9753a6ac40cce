"""Animated rainbow: each line is redrawn in place for a number of frames.

A line is cut into wrap-segments no wider than the terminal. Each segment
is drawn once per frame between a cursor save and restore, with the color
band shifted by ``spread`` per frame, then left in its final colors.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from lolcat.color import colorize
from lolcat.constants import ESC_RESET, ESC_RESTORE_CURSOR, ESC_SAVE_CURSOR

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import IO

    from lolcat.runtime import RuntimeState

logger = logging.getLogger(__name__)


def _next_segment(line: str, start: int, width: int) -> tuple[str, int]:
    """Return the segment starting at ``start`` and the offset after it.

    A newline ending the segment is consumed but not included.
    """
    end = min(len(line), start + width)
    newline = line.find("\n", start, end)
    if newline != -1:
        return line[start:newline], newline + 1
    if end < len(line) and line[end] == "\n":
        return line[start:end], end + 1
    return line[start:end], end


def iter_segments(line: str, width: int) -> Iterator[str]:
    """Split ``line`` at newlines and every ``width`` characters."""
    start = 0
    while start < len(line):
        segment, start = _next_segment(line, start, width)
        yield segment


def _draw_frame(segment: str, state: RuntimeState, frame: int) -> str:
    shift = state.spread * frame
    parts = [ESC_RESTORE_CURSOR]
    for index, char in enumerate(segment):
        parts.append(
            colorize(
                state.line_base,
                state.freq,
                state.spread_inverse * index + shift,
                state.depth,
                state.invert,
            )
        )
        parts.append(char)
    return "".join(parts)


def render_animated(
    line: str,
    state: RuntimeState,
    out: IO[str],
    *,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Animate ``line`` on ``out``, blocking for the frames' real time.

    The terminal width is read once per wrap-segment, so a resize applies
    from the next segment on. ``state.terminate`` is polled before each
    segment and each frame; once set, the call returns leaving the output
    written so far.
    """
    pause = sleep if sleep is not None else time.sleep
    start = 0
    while start < len(line):
        if state.terminate:
            logger.debug("Terminate requested before segment at line %d", state.line_count)
            return
        width = state.column_width
        segment, start = _next_segment(line, start, width)
        state.advance_line()
        out.write(ESC_SAVE_CURSOR)
        for frame in range(state.duration):
            if state.terminate:
                logger.debug("Terminate requested at frame %d", frame)
                out.flush()
                return
            out.write(_draw_frame(segment, state, frame))
            out.flush()
            pause(state.frame_interval)
        out.write(ESC_RESET)
        out.write("\n")
        out.flush()
