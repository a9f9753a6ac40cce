"""Color generator: maps a phase position to an SGR escape sequence.

The three channels sample one sine wave at phases offset by a third of a
turn, so sweeping the phase walks around the hue circle. Truecolor uses the
full 1..255 range per channel; palette mode uses five levels (0..4) per
channel folded into the 6x6x6 cube of the 256-color palette.
"""

from __future__ import annotations

import math
from typing import TypeAlias

from lolcat.config import ColorDepth
from lolcat.constants import CSI, SGR_BACKGROUND, SGR_FOREGROUND
from lolcat.limits import ESCAPE_BUFFER_SIZE

_THIRD_TURN = 2 * math.pi / 3

# (amplitude, center): truecolor spans 1..255, palette levels span 0..4
_WAVE = {
    ColorDepth.TRUECOLOR: (127, 128),
    ColorDepth.PALETTE256: (2, 2),
}

PALETTE_CUBE_OFFSET = 16

RGB: TypeAlias = tuple[int, int, int]


class EscapeOverflowError(AssertionError):
    """A generated sequence did not fit the escape buffer.

    Channel values are bounded, so this signals a broken invariant rather
    than a recoverable condition.
    """


def channels(
    base_phase: float,
    frequency: float,
    cycle_position: float,
    depth: ColorDepth = ColorDepth.PALETTE256,
) -> RGB:
    """Return the (red, green, blue) channel values for a phase position."""
    amplitude, center = _WAVE[depth]
    phase = base_phase + frequency * cycle_position
    red = int(math.sin(phase) * amplitude + center)
    green = int(math.sin(phase + _THIRD_TURN) * amplitude + center)
    blue = int(math.sin(phase + 2 * _THIRD_TURN) * amplitude + center)
    return red, green, blue


def palette_index(red: int, green: int, blue: int) -> int:
    """Fold palette channel levels into a 256-color cube index."""
    return PALETTE_CUBE_OFFSET + 36 * red + 6 * green + blue


def _bounded(sequence: str) -> str:
    if len(sequence) > ESCAPE_BUFFER_SIZE:
        raise EscapeOverflowError(
            f"escape sequence of {len(sequence)} chars exceeds {ESCAPE_BUFFER_SIZE}"
        )
    return sequence


def colorize(
    base_phase: float,
    frequency: float,
    cycle_position: float,
    depth: ColorDepth = ColorDepth.PALETTE256,
    invert: bool = False,
) -> str:
    """Build the foreground (or background, when inverted) escape sequence.

    Args:
        base_phase: Phase offset of the current line.
        frequency: Angular speed of the hue along the line.
        cycle_position: Horizontal offset, plus the frame shift when animating.
        depth: Palette or truecolor addressing.
        invert: Select the background instead of the foreground.

    Returns:
        An SGR sequence such as ``"\\x1b[38;5;214m"``.

    Raises:
        EscapeOverflowError: If the sequence exceeds ``ESCAPE_BUFFER_SIZE``.
    """
    layer = SGR_BACKGROUND if invert else SGR_FOREGROUND
    red, green, blue = channels(base_phase, frequency, cycle_position, depth)
    if depth == ColorDepth.TRUECOLOR:
        return _bounded(f"{CSI}{layer};2;{red};{green};{blue}m")
    return _bounded(f"{CSI}{layer};5;{palette_index(red, green, blue)}m")


__all__ = ["RGB", "EscapeOverflowError", "channels", "colorize", "palette_index"]
