"""Package restore and build actions."""

from ...config.models import BuildCommand, Project
from ...exceptions import BuildFailed, ConfigIncompleteError, RestoreFailed
from ..context import RefreshContext
from ..runner import CommandResult
from .base import BaseAction

MSBUILD = "msbuild"
NUGET = "nuget"


def build_command(ctx: RefreshContext, tool: str) -> BuildCommand:
    """Look up the configured template for ``tool``."""
    command = (ctx.config.build_config or {}).get(tool)
    if command is None:
        raise ConfigIncompleteError(f'No "{tool}" entry defined in "buildConfig".')
    return command


def _sln_file(project: Project) -> str:
    if not project.sln_file:
        raise ConfigIncompleteError(f'Project {project.name} uses {MSBUILD} but defines no "slnFile".')
    return project.sln_file


def _run(ctx: RefreshContext, command: BuildCommand) -> CommandResult:
    result = ctx.runner.run(command.build_file, list(command.build_args), ctx.project.build_path)
    if result.stderr:
        ctx.reporter.echo(result.stderr)
    return result


class RestorePackages(BaseAction):
    """Restore NuGet packages for the solution ahead of an msbuild build."""

    def should_run(self, ctx: RefreshContext) -> bool:
        return ctx.opts.build and ctx.project.build_tool == MSBUILD

    def execute(self, ctx: RefreshContext) -> None:
        project = ctx.project
        # The solution file goes right after the restore sub-command.
        command = build_command(ctx, NUGET).with_inserted(1, _sln_file(project))

        with ctx.reporter.step("Restoring nuget packages"):
            result = _run(ctx, command)
            if not result.ok:
                raise RestoreFailed(f"Package restore for {project.name} failed: {result.error}", project.name)


class BuildSolution(BaseAction):
    """Run the project's build tool in its build directory."""

    def should_run(self, ctx: RefreshContext) -> bool:
        return ctx.opts.build

    def execute(self, ctx: RefreshContext) -> None:
        project = ctx.project
        command = build_command(ctx, project.build_tool)

        if project.build_tool == MSBUILD:
            command = command.with_appended(_sln_file(project))

        with ctx.reporter.step("Rebuilding solution"):
            result = _run(ctx, command)
            if not result.ok:
                raise BuildFailed(f"Build of {project.name} failed: {result.error}", project.name)
