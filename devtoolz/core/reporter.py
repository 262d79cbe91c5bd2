"""Reporter classes for controlling command output."""

import math
from contextlib import contextmanager
from typing import Generator, Optional

from rich.markup import escape

from ..utils import console


def format_elapsed(seconds: float) -> str:
    """Render a duration as ``"<m> minutes and <s> seconds"``.

    Seconds are rounded half-up before being split, so 59.6 seconds reads
    as one minute rather than sixty seconds.
    """
    total = int(math.floor(seconds + 0.5))
    minutes, secs = divmod(total, 60)
    return f"{minutes} minutes and {secs} seconds"


class Reporter:
    """Default reporter writing progress lines to the console."""

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """Print ``title...`` before the wrapped block and ``complete.`` after it.

        Nothing is appended when the block raises; the error handler
        finishes the line.
        """
        console.print(f"  {escape(title)}...", end="", highlight=False)
        yield
        console.print("complete.", highlight=False)

    def project_header(self, name: str) -> None:
        console.print(f"Refreshing {escape(name)}:", highlight=False)

    def echo(self, text: str) -> None:
        """Mirror an external tool's own error stream verbatim."""
        text = text.rstrip()
        if text:
            console.print()
            console.print(text, markup=False, highlight=False)

    def elapsed(self, seconds: float) -> None:
        console.print()
        console.print()
        console.print(f"Refresh complete in {format_elapsed(seconds)}.", highlight=False)
        console.print()

    def print(self, message: Optional[str] = "") -> None:
        """Print a message (empty string prints blank line)."""
        console.print(message)


class NullReporter:
    """No-op reporter for testing."""

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """No-op context manager."""
        yield

    def project_header(self, name: str) -> None:
        pass

    def echo(self, text: str) -> None:
        pass

    def elapsed(self, seconds: float) -> None:
        pass

    def print(self, message: Optional[str] = "") -> None:
        pass
