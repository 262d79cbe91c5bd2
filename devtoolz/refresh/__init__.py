"""The refresh utility."""

from .command import refresh_command

__all__ = ["refresh_command"]
