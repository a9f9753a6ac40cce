"""Rendering configuration for lolcat."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from lolcat.constants import (
    DEFAULT_DURATION,
    DEFAULT_FREQ,
    DEFAULT_SEED,
    DEFAULT_SPEED,
    DEFAULT_SPREAD,
    DEFAULT_VERTICAL,
)
from lolcat.limits import MIN_DURATION, MIN_SPEED, MIN_SPREAD


class ColorDepth(StrEnum):
    """Color addressing mode of the output terminal."""

    PALETTE256 = "palette256"
    TRUECOLOR = "truecolor"


class LolcatConfig(BaseModel):
    """Caller-supplied settings, fixed for the whole run."""

    model_config = ConfigDict(frozen=True)

    spread: float = Field(
        default=DEFAULT_SPREAD, ge=MIN_SPREAD, description="Rainbow spread (inverse density)"
    )
    freq: float = Field(default=DEFAULT_FREQ, description="Horizontal hue frequency")
    vertical: float = Field(default=DEFAULT_VERTICAL, description="Hue increment per line")
    seed: int = Field(default=DEFAULT_SEED, ge=0, description="Rainbow seed, 0 = random")
    animate: bool = Field(default=False, description="Redraw each line in place")
    duration: int = Field(
        default=DEFAULT_DURATION, ge=MIN_DURATION, description="Frames per animated line"
    )
    speed: float = Field(default=DEFAULT_SPEED, ge=MIN_SPEED, description="Frames per second")
    invert: bool = Field(default=False, description="Color the background instead")
    depth: ColorDepth = Field(default=ColorDepth.PALETTE256)
    force: bool = Field(default=False, description="Color even when stdout is not a tty")


__all__ = ["ColorDepth", "LolcatConfig"]
