"""Working copy update action."""

from ...exceptions import UpdateFailed
from ..context import RefreshContext
from .base import BaseAction


class UpdateWorkingCopy(BaseAction):
    """Force-update the current project's working copy, discarding local changes."""

    def execute(self, ctx: RefreshContext) -> None:
        project = ctx.project

        ctx.reporter.project_header(project.name)
        with ctx.reporter.step("Updating local copy"):
            result = ctx.runner.run(ctx.opts.svn, ["update", "--force", "--non-interactive", project.path])
            if not result.ok:
                raise UpdateFailed(f"Update of {project.name} failed: {result.error}", project.name)
