"""DevToolz - developer utilities for keeping local working copies fresh."""

__version__ = "1.0.0"
