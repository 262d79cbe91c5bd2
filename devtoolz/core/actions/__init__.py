"""Actions for the refresh pipeline."""

from typing import List

from .base import BaseAction
from .build import BuildSolution, RestorePackages
from .validate import LoadConfig, ValidateOptions
from .refresh import RefreshProjects, ReportElapsed, StartClock, project_actions
from .resolve import ResolveTargets
from .update import UpdateWorkingCopy


def refresh_actions() -> List[BaseAction]:
    """The full refresh run, from option checks to the timing report."""
    return [
        ValidateOptions(),
        LoadConfig(),
        ResolveTargets(),
        StartClock(),
        RefreshProjects(),
        ReportElapsed(),
    ]


__all__ = [
    "BaseAction",
    "ValidateOptions",
    "LoadConfig",
    "ResolveTargets",
    "StartClock",
    "RefreshProjects",
    "ReportElapsed",
    "UpdateWorkingCopy",
    "RestorePackages",
    "BuildSolution",
    "project_actions",
    "refresh_actions",
]
