"""lolcat: rainbow coloring for terminal text."""

from lolcat.color import colorize
from lolcat.config import ColorDepth, LolcatConfig
from lolcat.runtime import RuntimeState

__version__ = "0.1.0"

__all__ = ["ColorDepth", "LolcatConfig", "RuntimeState", "colorize"]
