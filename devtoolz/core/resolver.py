"""Look up projects and workspaces by name."""

from typing import List, Sequence

from ..config.models import Project, Workspace
from ..exceptions import TargetNotConfigured


def find_project(name: str, projects: Sequence[Project]) -> Project:
    """Return the first project named ``name`` (exact, case-sensitive match)."""
    project = next((p for p in projects if p.name == name), None)
    if project is None:
        raise TargetNotConfigured(f"Project {name} is not configured.", name)
    return project


def find_workspace(name: str, workspaces: Sequence[Workspace]) -> Workspace:
    """Return the first workspace named ``name`` (exact, case-sensitive match)."""
    workspace = next((w for w in workspaces if w.name == name), None)
    if workspace is None:
        raise TargetNotConfigured(f"Workspace {name} is not configured.", name)
    return workspace


def expand_workspace(workspace: Workspace, projects: Sequence[Project]) -> List[Project]:
    """Resolve every project reference of ``workspace``, in order.

    All references are resolved before anything runs, so a single
    unknown name fails the whole workspace.
    """
    resolved = []
    for name in workspace.projects:
        project = next((p for p in projects if p.name == name), None)
        if project is None:
            raise TargetNotConfigured(f"Workspace project {name} is not configured.", name)
        resolved.append(project)
    return resolved
