"""Pytest fixtures for lolcat tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from lolcat.config import ColorDepth, LolcatConfig
from lolcat.debug_log import reset_logging
from lolcat.runtime import RuntimeState

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


FIXED_SEED = 42


@pytest.fixture(autouse=True)
def _clean_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's terminal settings out of the tests."""
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.delenv("LOLCAT_DEBUG", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    yield
    reset_logging()


@pytest.fixture
def state_factory() -> Callable[..., RuntimeState]:
    """Factory for RuntimeState objects with a fixed seed and width."""

    def _factory(
        *,
        spread: float = 3.0,
        freq: float = 0.1,
        vertical: float = 0.3,
        seed: int = FIXED_SEED,
        duration: int = 12,
        speed: float = 20.0,
        invert: bool = False,
        depth: ColorDepth = ColorDepth.PALETTE256,
        column_width: int = 80,
    ) -> RuntimeState:
        config = LolcatConfig(
            spread=spread,
            freq=freq,
            vertical=vertical,
            seed=seed,
            duration=duration,
            speed=speed,
            invert=invert,
            depth=depth,
        )
        return RuntimeState.from_config(config, column_width=column_width)

    return _factory
