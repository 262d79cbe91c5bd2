"""Base action class for the pipeline."""

from abc import ABC, abstractmethod
from typing import Optional

from ..context import RefreshContext, Stage


class BaseAction(ABC):
    """Base class for all pipeline actions.

    Actions are the building blocks of the refresh pipeline.
    Each action:
    1. Checks if it should run (should_run)
    2. Executes its logic (execute), raising a RefreshError on failure
    3. Updates the context with results
    """

    #: Stage the run reaches once this action succeeds (None keeps the current one).
    stage: Optional[Stage] = None

    def should_run(self, ctx: RefreshContext) -> bool:
        """Determine if this action should execute.

        Override this to conditionally skip actions based on context state.

        Args:
            ctx: The pipeline context

        Returns:
            True if the action should execute, False to skip
        """
        return True

    @abstractmethod
    def execute(self, ctx: RefreshContext) -> None:
        """Execute the action's main logic.

        Args:
            ctx: The pipeline context (read and modify as needed)
        """
        pass
