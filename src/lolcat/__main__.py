"""Allow ``python -m lolcat``."""

from __future__ import annotations

from lolcat.cli import main

if __name__ == "__main__":
    main(prog_name="lolcat")
