"""Pipeline orchestrator for executing actions in sequence."""

from typing import List

from loguru import logger

from .actions.base import BaseAction
from .context import RefreshContext, Stage


def run_pipeline(ctx: RefreshContext, actions: List[BaseAction]) -> None:
    """Execute a sequence of actions with the given context.

    Args:
        ctx: The context object containing state and dependencies
        actions: List of actions to execute in order

    The pipeline will:
    1. Skip actions whose ``should_run`` is False
    2. Execute each remaining action in sequence
    3. Advance ``ctx.stage`` to the action's stage once it succeeds
    4. Mark the run FAILED and re-raise on the first exception
    """
    for action in actions:
        if not action.should_run(ctx):
            continue

        try:
            action.execute(ctx)
        except Exception as e:
            logger.debug("Action {} failed in stage {}: {}", action.__class__.__name__, ctx.stage.value, e)
            ctx.stage = Stage.FAILED
            raise

        if action.stage is not None and ctx.stage != action.stage:
            logger.debug("Stage {} -> {}", ctx.stage.value, action.stage.value)
            ctx.stage = action.stage
