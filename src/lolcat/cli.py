"""Command line entry point for lolcat."""

from __future__ import annotations

import contextlib
import io
import logging
import os
import sys
from typing import TYPE_CHECKING

import click

from lolcat.config import ColorDepth, LolcatConfig
from lolcat.constants import (
    DEFAULT_DURATION,
    DEFAULT_FREQ,
    DEFAULT_SEED,
    DEFAULT_SPEED,
    DEFAULT_SPREAD,
    DEFAULT_VERTICAL,
    ESC_HIDE_CURSOR,
    ESC_RESET,
    ESC_SHOW_CURSOR,
)
from lolcat.debug_log import setup_logging
from lolcat.limits import DEBUG_ENABLED, MIN_DURATION, MIN_SPEED, MIN_SPREAD
from lolcat.reader import INPUT_ENCODING, INPUT_ERRORS, InputReadError, iter_lines
from lolcat.render import select_renderer
from lolcat.runtime import RuntimeState, signal_handlers
from lolcat.terminal import is_terminal, supports_truecolor
from lolcat.version import version_banner

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import IO

    from lolcat.render import Renderer

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EXIT_INTERRUPTED = 130


def _run(
    files: Sequence[str],
    renderer: Renderer,
    state: RuntimeState,
    out: IO[str],
    *,
    animating: bool,
) -> None:
    """Feed every input line to the renderer until input ends or terminate is set."""
    if animating:
        out.write(ESC_HIDE_CURSOR)
    try:
        for line in iter_lines(files):
            if state.terminate:
                logger.debug("Stopping after %d lines", state.line_count)
                break
            renderer(line, state, out)
    finally:
        # Lines end with a reset already; only a cut-off line needs one
        if state.color_enabled and (state.char_count > 0 or state.terminate):
            out.write(ESC_RESET)
        if animating:
            out.write(ESC_SHOW_CURSOR)
        out.flush()


def _output_stream() -> IO[str]:
    """Return stdout set up to re-encode what the reader decoded.

    Input lines carry undecodable bytes as surrogates, so stdout must use
    the same codec with ``surrogateescape`` to write them back unchanged.
    """
    out = sys.stdout
    if isinstance(out, io.TextIOWrapper):
        out.reconfigure(encoding=INPUT_ENCODING, errors=INPUT_ERRORS)
    return out


def _silence_stdout() -> None:
    """Point stdout at devnull so interpreter shutdown does not hit the closed pipe again."""
    with contextlib.suppress(OSError, ValueError):
        target = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, target)
        os.close(devnull)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("files", nargs=-1, metavar="[FILE]...")
@click.option(
    "-p",
    "--spread",
    type=click.FloatRange(min=MIN_SPREAD),
    default=DEFAULT_SPREAD,
    show_default=True,
    help="Rainbow spread",
)
@click.option(
    "-F", "--freq", type=float, default=DEFAULT_FREQ, show_default=True, help="Rainbow frequency"
)
@click.option(
    "-V",
    "--vertical",
    type=float,
    default=DEFAULT_VERTICAL,
    show_default=True,
    help="Rainbow shift per line",
)
@click.option(
    "-S",
    "--seed",
    type=click.IntRange(min=0),
    default=DEFAULT_SEED,
    show_default=True,
    help="Rainbow seed, 0 = random",
)
@click.option("-a", "--animate", is_flag=True, help="Enable psychedelics")
@click.option(
    "-d",
    "--duration",
    type=click.IntRange(min=MIN_DURATION),
    default=DEFAULT_DURATION,
    show_default=True,
    help="Animation duration",
)
@click.option(
    "-s",
    "--speed",
    type=click.FloatRange(min=MIN_SPEED),
    default=DEFAULT_SPEED,
    show_default=True,
    help="Animation speed",
)
@click.option("-i", "--invert", is_flag=True, help="Invert fg and bg")
@click.option("-t", "--truecolor", is_flag=True, help="24-bit (truecolor)")
@click.option("-f", "--force", is_flag=True, help="Force color even when stdout is not a tty")
@click.option("-v", "--version", is_flag=True, help="Print version and exit")
@click.option("--debug", is_flag=True, hidden=True, help="Log diagnostics to stderr")
@click.pass_context
def main(
    ctx: click.Context,
    files: tuple[str, ...],
    spread: float,
    freq: float,
    vertical: float,
    seed: int,
    animate: bool,
    duration: int,
    speed: float,
    invert: bool,
    truecolor: bool,
    force: bool,
    version: bool,
    debug: bool,
) -> None:
    """Concatenate FILE(s), or standard input, to standard output.

    With no FILE, or when FILE is -, read standard input.

    \b
    Examples:
        lolcat f - g      Output f's contents, then stdin, then g's contents.
        lolcat            Copy standard input to standard output.
        fortune | lolcat  Display a rainbow cookie.
    """
    if version:
        click.echo(version_banner())
        ctx.exit(0)

    setup_logging(debug or DEBUG_ENABLED)

    depth = ColorDepth.TRUECOLOR if truecolor or supports_truecolor() else ColorDepth.PALETTE256
    config = LolcatConfig(
        spread=spread,
        freq=freq,
        vertical=vertical,
        seed=seed,
        animate=animate,
        duration=duration,
        speed=speed,
        invert=invert,
        depth=depth,
        force=force,
    )

    out = _output_stream()
    color_enabled = config.force or is_terminal(out)
    state = RuntimeState.from_config(config, color_enabled=color_enabled, stream=out)
    renderer = select_renderer(config, color_enabled)
    logger.debug(
        "depth=%s color=%s width=%d line_base=%.4f",
        depth,
        color_enabled,
        state.column_width,
        state.line_base,
    )

    try:
        with signal_handlers(state, out):
            _run(files, renderer, state, out, animating=color_enabled and config.animate)
    except InputReadError as exc:
        click.secho(f"lolcat: {exc}", err=True, fg="red")
        ctx.exit(1)
    except BrokenPipeError:
        _silence_stdout()
        ctx.exit(1)
    except KeyboardInterrupt:
        ctx.exit(EXIT_INTERRUPTED)


__all__ = ["main"]
