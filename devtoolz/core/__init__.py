"""Core infrastructure for the refresh pipeline."""

from .context import RefreshContext, Stage
from .options import RefreshOptions
from .pipeline import run_pipeline
from .reporter import NullReporter, Reporter, format_elapsed
from .runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    "RefreshContext",
    "Stage",
    "RefreshOptions",
    "run_pipeline",
    "Reporter",
    "NullReporter",
    "format_elapsed",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
]
