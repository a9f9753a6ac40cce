"""Version reported by ``lolcat --version``."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "pylolcat"
SOURCE_TREE_LABEL = "src"


@lru_cache(maxsize=1)
def get_lolcat_version() -> str:
    """Return the installed ``pylolcat`` version.

    A source checkout without distribution metadata reports the package's
    ``__version__`` with a ``+src`` local label, so it cannot be mistaken for
    a release.
    """
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        from lolcat import __version__

        return f"{__version__}+{SOURCE_TREE_LABEL}"


def version_banner() -> str:
    return f"lolcat {get_lolcat_version()}"


__all__ = ["DIST_NAME", "get_lolcat_version", "version_banner"]
