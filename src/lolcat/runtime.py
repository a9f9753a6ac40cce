"""Runtime state shared by the renderers and the signal handlers.

The render loop is the only writer of ``line_base``, ``char_count`` and
``line_count``. The signal handlers are the only writers of ``column_width``
and ``terminate``, and each assigns exactly one attribute, so the loop never
observes a half-updated value.
"""

from __future__ import annotations

import logging
import math
import random
import signal
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lolcat.config import ColorDepth
from lolcat.limits import DEFAULT_COLUMNS
from lolcat.terminal import query_columns

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from types import FrameType
    from typing import IO

    from lolcat.config import LolcatConfig

logger = logging.getLogger(__name__)


def initial_line_base(seed: int, *, clock: Callable[[], int] = time.time_ns) -> float:
    """Draw the starting line phase in [0, pi).

    A zero seed is replaced by a reading of ``clock`` so every run differs.
    """
    if seed == 0:
        seed = clock()
    return random.Random(seed).random() * math.pi


@dataclass(slots=True)
class RuntimeState:
    """Mutable state for one invocation."""

    spread: float
    spread_inverse: float
    freq: float
    vertical: float
    depth: ColorDepth
    invert: bool
    duration: int
    frame_interval: float
    line_base: float = 0.0
    char_count: int = 0
    line_count: int = 0
    column_width: int = DEFAULT_COLUMNS
    terminate: bool = False
    color_enabled: bool = True

    @classmethod
    def from_config(
        cls,
        config: LolcatConfig,
        *,
        color_enabled: bool = True,
        column_width: int | None = None,
        stream: IO[str] | None = None,
    ) -> RuntimeState:
        """Derive the runtime state from a validated configuration."""
        if column_width is None:
            column_width = query_columns(stream)
        return cls(
            spread=config.spread,
            spread_inverse=1.0 / config.spread,
            freq=config.freq,
            vertical=config.vertical,
            depth=config.depth,
            invert=config.invert,
            duration=config.duration,
            frame_interval=1.0 / config.speed,
            line_base=initial_line_base(config.seed),
            column_width=max(1, column_width),
            color_enabled=color_enabled,
        )

    @property
    def frame_interval_parts(self) -> tuple[int, float]:
        """Frame interval split into whole seconds and the sub-second rest."""
        whole, fraction = divmod(self.frame_interval, 1.0)
        return int(whole), fraction

    def advance_line(self) -> None:
        """Step the line phase at the start of a new output line."""
        self.line_base += self.vertical * self.spread_inverse
        self.line_count += 1

    def handle_resize(self, stream: IO[str] | None = None) -> None:
        self.column_width = query_columns(stream)

    def request_terminate(self) -> None:
        self.terminate = True


@contextmanager
def signal_handlers(state: RuntimeState, stream: IO[str] | None = None) -> Iterator[None]:
    """Route SIGWINCH and SIGINT into ``state`` for the duration of the block.

    Handlers can only be installed from the main thread; elsewhere the block
    runs without them. Previous handlers are restored on exit.

    The first SIGINT only sets ``state.terminate``; the render loop notices
    it at its next poll point. A second SIGINT raises KeyboardInterrupt.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _on_resize(signum: int, frame: FrameType | None) -> None:
        state.handle_resize(stream)

    def _on_interrupt(signum: int, frame: FrameType | None) -> None:
        # A second interrupt means the loop is stuck in a blocking read
        if state.terminate:
            raise KeyboardInterrupt
        state.request_terminate()

    previous: dict[int, object] = {}
    previous[signal.SIGINT] = signal.signal(signal.SIGINT, _on_interrupt)
    if hasattr(signal, "SIGWINCH"):
        previous[signal.SIGWINCH] = signal.signal(signal.SIGWINCH, _on_resize)
    logger.debug("Installed handlers for %s", sorted(signal.Signals(s).name for s in previous))
    try:
        yield
    finally:
        for signum, handler in previous.items():
            # None means the previous handler was not installed from Python
            restored = signal.SIG_DFL if handler is None else handler
            signal.signal(signum, restored)  # type: ignore[arg-type]


__all__ = ["RuntimeState", "initial_line_base", "signal_handlers"]
