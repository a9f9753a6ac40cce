"""Tests for the runtime state coordinator."""

from __future__ import annotations

import math
import signal
import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lolcat.config import ColorDepth, LolcatConfig
from lolcat.runtime import RuntimeState, initial_line_base, signal_handlers

pytestmark = pytest.mark.unit


class TestInitialLineBase:
    @given(st.integers(min_value=1, max_value=2**63))
    def test_seeded_base_is_in_half_turn(self, seed: int) -> None:
        base = initial_line_base(seed)
        assert 0.0 <= base < math.pi

    @given(st.integers(min_value=1, max_value=2**63))
    def test_nonzero_seed_is_deterministic(self, seed: int) -> None:
        assert initial_line_base(seed) == initial_line_base(seed)

    def test_zero_seed_reads_the_clock(self) -> None:
        calls: list[int] = []

        def clock() -> int:
            calls.append(1)
            return 123456789

        assert initial_line_base(0, clock=clock) == initial_line_base(123456789)
        assert calls == [1]

    def test_nonzero_seed_ignores_the_clock(self) -> None:
        def clock() -> int:
            raise AssertionError("clock must not be read")

        initial_line_base(7, clock=clock)


class TestFromConfig:
    def test_derived_fields(self) -> None:
        config = LolcatConfig(spread=4.0, speed=8.0, seed=9, depth=ColorDepth.TRUECOLOR)
        state = RuntimeState.from_config(config, column_width=100, color_enabled=False)

        assert state.spread_inverse == pytest.approx(0.25)
        assert state.frame_interval == pytest.approx(0.125)
        assert state.line_base == initial_line_base(9)
        assert state.depth is ColorDepth.TRUECOLOR
        assert state.column_width == 100
        assert state.color_enabled is False
        assert state.char_count == 0
        assert state.line_count == 0
        assert state.terminate is False

    def test_width_queried_when_not_given(self, mocker) -> None:
        query = mocker.patch("lolcat.runtime.query_columns", return_value=57)
        state = RuntimeState.from_config(LolcatConfig(seed=1))
        assert state.column_width == 57
        query.assert_called_once_with(None)

    def test_width_never_below_one(self) -> None:
        state = RuntimeState.from_config(LolcatConfig(seed=1), column_width=0)
        assert state.column_width == 1

    @given(st.floats(min_value=0.1, max_value=1e6))
    def test_spread_inverse_positive(self, spread: float) -> None:
        state = RuntimeState.from_config(LolcatConfig(spread=spread, seed=1), column_width=80)
        assert state.spread_inverse > 0


class TestMutations:
    def test_advance_line(self, state_factory) -> None:
        state = state_factory(spread=2.0, vertical=0.5)
        start = state.line_base

        state.advance_line()
        state.advance_line()

        assert state.line_base == pytest.approx(start + 2 * 0.25)
        assert state.line_count == 2

    def test_frame_interval_parts(self, state_factory) -> None:
        assert state_factory(speed=4.0).frame_interval_parts == (0, pytest.approx(0.25))
        assert state_factory(speed=0.4).frame_interval_parts == (2, pytest.approx(0.5))

    def test_handle_resize_requeries(self, state_factory, mocker) -> None:
        state = state_factory(column_width=80)
        mocker.patch("lolcat.runtime.query_columns", return_value=40)

        state.handle_resize()

        assert state.column_width == 40

    def test_request_terminate(self, state_factory) -> None:
        state = state_factory()
        state.request_terminate()
        assert state.terminate is True


class TestSignalHandlers:
    def test_interrupt_sets_terminate(self, state_factory) -> None:
        state = state_factory()
        with signal_handlers(state):
            signal.raise_signal(signal.SIGINT)
        assert state.terminate is True

    def test_second_interrupt_raises(self, state_factory) -> None:
        state = state_factory()
        with pytest.raises(KeyboardInterrupt), signal_handlers(state):
            signal.raise_signal(signal.SIGINT)
            signal.raise_signal(signal.SIGINT)

    @pytest.mark.skipif(not hasattr(signal, "SIGWINCH"), reason="no SIGWINCH on this platform")
    def test_resize_updates_width(self, state_factory, mocker) -> None:
        state = state_factory(column_width=80)
        mocker.patch("lolcat.runtime.query_columns", return_value=33)
        with signal_handlers(state):
            signal.raise_signal(signal.SIGWINCH)
        assert state.column_width == 33

    def test_previous_handlers_restored(self, state_factory) -> None:
        before = signal.getsignal(signal.SIGINT)
        with signal_handlers(state_factory()):
            assert signal.getsignal(signal.SIGINT) is not before
        assert signal.getsignal(signal.SIGINT) is before

    def test_worker_thread_installs_nothing(self, state_factory) -> None:
        before = signal.getsignal(signal.SIGINT)
        seen: list[object] = []

        def worker() -> None:
            with signal_handlers(state_factory()):
                seen.append(signal.getsignal(signal.SIGINT))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [before]
