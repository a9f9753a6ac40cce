"""Defaults and terminal control sequences."""

from __future__ import annotations

DEFAULT_SPREAD = 3.0
DEFAULT_FREQ = 0.1
DEFAULT_VERTICAL = 0.3
DEFAULT_SEED = 0
DEFAULT_DURATION = 12
DEFAULT_SPEED = 20.0


CSI = "\x1b["

ESC_RESET = CSI + "0m"
ESC_SAVE_CURSOR = "\x1b7"
ESC_RESTORE_CURSOR = "\x1b8"
ESC_HIDE_CURSOR = CSI + "?25l"
ESC_SHOW_CURSOR = CSI + "?25h"

SGR_FOREGROUND = 38
SGR_BACKGROUND = 48


COLORTERM_ENV = "COLORTERM"
TRUECOLOR_VALUES = frozenset({"truecolor", "24bit"})
