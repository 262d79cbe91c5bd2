"""Pytest configuration and shared fixtures."""
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest
from click.testing import CliRunner

from devtoolz.core import CommandResult, NullReporter, RefreshContext, RefreshOptions


class FakeRunner:
    """Command runner that records invocations instead of starting processes.

    ``failures`` maps a substring of the joined command line to the result
    returned for any invocation containing it.
    """

    def __init__(self, failures: Optional[Dict[str, CommandResult]] = None):
        self.failures = failures or {}
        self.calls: List[Tuple[str, List[str], Optional[str]]] = []

    def run(self, command: str, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        self.calls.append((command, list(args), cwd))
        line = " ".join([command, *args])
        for needle, result in self.failures.items():
            if needle in line:
                return result
        return CommandResult(output="ok")

    @property
    def commands(self) -> List[str]:
        return [" ".join([command, *args]) for command, args, _ in self.calls]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """A configuration with a generic build tool, msbuild and two workspaces."""
    return {
        "reposRoot": None,
        "buildConfig": {
            "grunt": {"buildFile": "grunt", "buildArgs": ["build", "--force"]},
            "msbuild": {"buildFile": "msbuild", "buildArgs": ["/t:Rebuild", "/p:Configuration=Debug"]},
            "nuget": {"buildFile": "nuget", "buildArgs": ["restore", "-NonInteractive"]},
        },
        "projects": [
            {"name": "A", "path": "/src/a", "buildTool": "grunt", "buildPath": "/src/a"},
            {"name": "B", "path": "/src/b", "buildTool": "grunt", "buildPath": "/src/b"},
            {"name": "C", "path": "/src/c", "buildTool": "msbuild", "buildPath": "/src/c", "slnFile": "C.sln"},
        ],
        "workspaces": [
            {"name": "all", "projects": ["A", "B", "C"]},
            {"name": "broken", "projects": ["A", "X"]},
        ],
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a config dict (or raw text) to a temp file and return its path."""
    def _write(content, name: str = "config.json") -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return str(path)
    return _write


@pytest.fixture
def make_context(fake_runner):
    """Build a RefreshContext with a silent reporter and the fake runner."""
    def _make(**opts) -> RefreshContext:
        return RefreshContext(RefreshOptions(**opts), NullReporter(), runner=fake_runner)
    return _make
