"""Rendering strategies: plain coloring, animated coloring, pass-through."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from lolcat.render.animated import iter_segments, render_animated
from lolcat.render.plain import render_plain

if TYPE_CHECKING:
    from typing import IO

    from lolcat.config import LolcatConfig
    from lolcat.runtime import RuntimeState

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def __call__(self, text: str, state: RuntimeState, out: IO[str], /) -> None: ...


def render_passthrough(text: str, state: RuntimeState, out: IO[str]) -> None:
    """Write ``text`` unchanged, used when color is disabled."""
    if state.terminate:
        return
    out.write(text)


def select_renderer(config: LolcatConfig, color_enabled: bool) -> Renderer:
    """Pick the strategy for this run.

    Animation needs color; without color the text passes through untouched.
    """
    if not color_enabled:
        renderer: Renderer = render_passthrough
    elif config.animate:
        renderer = render_animated
    else:
        renderer = render_plain
    logger.debug("Selected renderer %s", renderer.__name__)  # type: ignore[attr-defined]
    return renderer


__all__ = [
    "Renderer",
    "iter_segments",
    "render_animated",
    "render_passthrough",
    "render_plain",
    "select_renderer",
]
