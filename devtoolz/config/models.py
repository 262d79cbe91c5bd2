"""Configuration models for refresh."""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class BuildCommand:
    """Executable plus argument template for one build tool."""
    build_file: str
    build_args: Tuple[str, ...] = ()

    def with_inserted(self, index: int, arg: str) -> "BuildCommand":
        """Return a copy with ``arg`` inserted at ``index``."""
        args = list(self.build_args)
        args.insert(index, arg)
        return replace(self, build_args=tuple(args))

    def with_appended(self, arg: str) -> "BuildCommand":
        """Return a copy with ``arg`` added after the last argument."""
        return replace(self, build_args=self.build_args + (arg,))


@dataclass(frozen=True)
class Project:
    name: str
    path: str = ""
    build_tool: Optional[str] = None
    build_path: Optional[str] = None
    sln_file: Optional[str] = None


@dataclass(frozen=True)
class Workspace:
    name: str
    projects: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Configuration:
    """Snapshot of config.json for a single run."""
    repos_root: Optional[str] = None
    build_config: Optional[Dict[str, BuildCommand]] = None
    projects: Tuple[Project, ...] = ()
    workspaces: Tuple[Workspace, ...] = ()
    source: Optional[str] = field(default=None, compare=False)
