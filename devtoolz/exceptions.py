"""Exceptions raised by the refresh pipeline."""


class RefreshError(Exception):
    """Base exception for every terminal refresh failure."""
    pass


class UsageError(RefreshError):
    """Raised when command line options are missing or conflict."""
    pass


class ConfigNotFound(RefreshError):
    """Raised when the configuration file cannot be read."""
    pass


class ConfigParseError(RefreshError):
    """Raised when the configuration file is not valid JSON or has the wrong shape."""
    pass


class ConfigIncompleteError(RefreshError):
    """Raised when a requested feature has no configuration to drive it."""
    pass


class TargetNotConfigured(RefreshError):
    """Raised when a requested project or workspace is not in the configuration."""

    def __init__(self, message: str, target: str):
        super().__init__(message)
        self.target = target


class CommandFailed(RefreshError):
    """Raised when an external tool exits non-zero or cannot be started."""

    def __init__(self, message: str, project: str):
        super().__init__(message)
        self.project = project


class UpdateFailed(CommandFailed):
    pass


class RestoreFailed(CommandFailed):
    pass


class BuildFailed(CommandFailed):
    pass
