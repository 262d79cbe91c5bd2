"""Console entry point for refresh."""

import sys
from typing import List, Optional

from .refresh.command import refresh_command
from .refresh.display import should_show_header, show_header


def main(argv: Optional[List[str]] = None) -> None:
    """Show the banner, then hand the arguments to the click command."""
    args = sys.argv[1:] if argv is None else list(argv)

    if should_show_header(args):
        show_header()

    refresh_command.main(args=args, prog_name="refresh")
