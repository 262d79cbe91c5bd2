"""Banner shown before the refresh utility starts."""

from typing import Sequence

from .. import __version__
from ..utils import console

HELP_AND_VERSION_FLAGS = ("-h", "--help", "-V", "--version")


def should_show_header(argv: Sequence[str]) -> bool:
    """Return False only when every help and version flag is present.

    This reproduces the historical check, which was meant to hide the
    banner for help/version output but combines the flags with OR.
    """
    return any(flag not in argv for flag in HELP_AND_VERSION_FLAGS)


def format_header(version: str = __version__) -> str:
    title = f"DevToolz v{version}"
    lines = [
        "*" * 40,
        "*" + " " * 38 + "*",
        "*" + title.center(38) + "*",
        "*" + " " * 38 + "*",
        "*" * 40,
        "",
        "",
        "utility: refresh",
        "",
        "",
    ]
    return "\n".join(lines)


def show_header() -> None:
    """Clear the terminal and print the DevToolz banner."""
    console.clear()
    console.print(format_header(), markup=False, highlight=False)
