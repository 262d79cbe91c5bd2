"""Timing and per-project orchestration actions."""

from typing import List

from ..context import RefreshContext, Stage
from .base import BaseAction
from .build import BuildSolution, RestorePackages
from .update import UpdateWorkingCopy


def project_actions() -> List[BaseAction]:
    """Steps applied to every project, in order."""
    return [UpdateWorkingCopy(), RestorePackages(), BuildSolution()]


class StartClock(BaseAction):
    stage = Stage.RUNNING

    def execute(self, ctx: RefreshContext) -> None:
        ctx.start_time = ctx.clock()
        ctx.reporter.print()


class RefreshProjects(BaseAction):
    """Update (and optionally build) each resolved project strictly in sequence.

    The first failure propagates unchanged and later projects are left alone.
    """

    def execute(self, ctx: RefreshContext) -> None:
        from ..pipeline import run_pipeline

        for project in ctx.projects:
            ctx.project = project
            run_pipeline(ctx, project_actions())
            ctx.reporter.print()
        ctx.project = None


class ReportElapsed(BaseAction):
    stage = Stage.DONE

    def execute(self, ctx: RefreshContext) -> None:
        ctx.end_time = ctx.clock()
        ctx.reporter.elapsed(ctx.elapsed)
