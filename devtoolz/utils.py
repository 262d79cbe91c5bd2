"""CLI utilities and decorators."""

import sys
from functools import wraps

from loguru import logger
from rich.markup import escape

from .exceptions import RefreshError
from .themed_console import ThemedConsole

# soft_wrap keeps long paths and tool messages on one line
console = ThemedConsole(soft_wrap=True)


def handle_errors(func):
    """Decorator to report refresh errors and end the process with status 1."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RefreshError as e:
            console.print()
            console.error(f"Error: {escape(str(e))}")
            console.print()
        except Exception as e:
            logger.opt(exception=e).debug("Unhandled exception")
            console.print()
            console.error(f"Unexpected error: {escape(str(e))}")
            console.print()
        sys.exit(1)
    return wrapper
