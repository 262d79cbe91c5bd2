"""Context object for managing state through the pipeline."""

import time
from enum import Enum
from typing import Callable, List, Optional, Union

from ..config.models import Configuration, Project
from .options import RefreshOptions
from .reporter import NullReporter, Reporter
from .runner import CommandRunner, SubprocessRunner


class Stage(str, Enum):
    """Lifecycle of one refresh run."""
    INIT = "init"
    VALIDATED = "validated"
    CONFIG_LOADED = "config_loaded"
    RESOLVED = "resolved"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


class RefreshContext:
    """Shared context for the refresh pipeline.

    This context is passed through all actions and accumulates state
    as the pipeline progresses. It lives for exactly one invocation.
    """

    def __init__(
        self,
        opts: RefreshOptions,
        reporter: Union[Reporter, NullReporter],
        runner: Optional[CommandRunner] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.opts = opts
        self.reporter = reporter
        self.runner = runner or SubprocessRunner()
        self.clock = clock

        # State accumulated during pipeline execution
        self.stage = Stage.INIT
        self.config: Optional[Configuration] = None
        self.projects: List[Project] = []
        self.project: Optional[Project] = None
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    @property
    def elapsed(self) -> Optional[float]:
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time
