"""Target resolution action."""

from ..context import RefreshContext, Stage
from ..resolver import expand_workspace, find_project, find_workspace
from .base import BaseAction


class ResolveTargets(BaseAction):
    """Turn the requested project or workspace into an ordered project list.

    Every workspace reference is resolved here, so nothing is updated
    when any of them is unknown.
    """

    stage = Stage.RESOLVED

    def execute(self, ctx: RefreshContext) -> None:
        config = ctx.config

        if ctx.opts.project:
            ctx.projects = [find_project(ctx.opts.project, config.projects)]
        else:
            workspace = find_workspace(ctx.opts.workspace, config.workspaces)
            ctx.projects = expand_workspace(workspace, config.projects)
