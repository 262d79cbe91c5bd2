"""Option validation and configuration loading actions."""

from ...config.loader import load_config
from ...exceptions import UsageError
from ..context import RefreshContext, Stage
from .base import BaseAction


class ValidateOptions(BaseAction):
    """Reject missing or conflicting target options before touching the disk."""

    stage = Stage.VALIDATED

    def execute(self, ctx: RefreshContext) -> None:
        opts = ctx.opts

        if opts.no_arguments:
            raise UsageError("No arguments defined.")

        # Refresh does not support both project and workspace simultaneously.
        if opts.project and opts.workspace:
            raise UsageError("Options --project and --workspace cannot be used together.")

        if not opts.project and not opts.workspace:
            raise UsageError("One of --project or --workspace is required.")


class LoadConfig(BaseAction):
    """Read config.json into the context."""

    stage = Stage.CONFIG_LOADED

    def execute(self, ctx: RefreshContext) -> None:
        ctx.config = load_config(ctx.opts.config_path, build=ctx.opts.build)
