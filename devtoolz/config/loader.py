"""Load and validate config.json."""

import json
import os
from typing import Any, Dict, List, Optional

from loguru import logger

from ..exceptions import ConfigIncompleteError, ConfigNotFound, ConfigParseError
from .models import BuildCommand, Configuration, Project, Workspace

DEFAULT_CONFIG_PATH = "config.json"

DEFAULTS: Dict[str, Any] = {
    "reposRoot": None,
    "buildConfig": None,
    "projects": [],
    "workspaces": [],
}


def load_config(path: Optional[str] = None, build: bool = False) -> Configuration:
    """Read ``path`` (default ``config.json``) into a Configuration.

    Args:
        path: Location of the JSON configuration file
        build: Whether a build was requested; requires ``buildConfig``

    Raises:
        ConfigNotFound: The file does not exist or is not readable
        ConfigParseError: The content is not JSON or has the wrong shape
        ConfigIncompleteError: ``build`` is set but ``buildConfig`` is missing
    """
    path = path or DEFAULT_CONFIG_PATH

    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise ConfigNotFound(f"Cannot locate --config value: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Cannot parse {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Cannot parse {path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ConfigNotFound(f"Cannot locate --config value: {path} ({e.strerror})") from e

    config = parse_config(raw, source=path)
    logger.debug(
        "Loaded {} with {} project(s) and {} workspace(s)",
        path, len(config.projects), len(config.workspaces)
    )

    if build and config.build_config is None:
        raise ConfigIncompleteError('Using option --build but no "buildConfig" configuration defined.')

    return config


def parse_config(raw: Any, source: Optional[str] = None) -> Configuration:
    """Build a Configuration from decoded JSON, applying top-level defaults."""
    if not isinstance(raw, dict):
        raise ConfigParseError("Configuration must be a JSON object")

    data = {**DEFAULTS, **{k: v for k, v in raw.items() if v is not None}}

    projects = [_parse_project(entry, i) for i, entry in enumerate(_as_list(data, "projects"))]
    workspaces = [_parse_workspace(entry, i) for i, entry in enumerate(_as_list(data, "workspaces"))]

    _warn_duplicates("project", [p.name for p in projects])
    _warn_duplicates("workspace", [w.name for w in workspaces])

    return Configuration(
        repos_root=data["reposRoot"],
        build_config=_parse_build_config(data["buildConfig"]),
        projects=tuple(projects),
        workspaces=tuple(workspaces),
        source=source,
    )


def _as_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise ConfigParseError(f'"{key}" must be an array')
    return value


def _require_name(entry: Any, kind: str, index: int) -> str:
    if not isinstance(entry, dict):
        raise ConfigParseError(f"{kind} entry #{index + 1} must be an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigParseError(f"{kind} entry #{index + 1} has no name")
    return name


def _parse_project(entry: Any, index: int) -> Project:
    name = _require_name(entry, "Project", index)
    return Project(
        name=name,
        path=entry.get("path") or "",
        build_tool=entry.get("buildTool"),
        build_path=entry.get("buildPath"),
        sln_file=entry.get("slnFile"),
    )


def _parse_workspace(entry: Any, index: int) -> Workspace:
    name = _require_name(entry, "Workspace", index)
    projects = entry.get("projects") or []
    if not isinstance(projects, list) or not all(isinstance(p, str) for p in projects):
        raise ConfigParseError(f'Workspace {name} "projects" must be an array of project names')
    return Workspace(name=name, projects=tuple(projects))


def _parse_build_config(value: Any) -> Optional[Dict[str, BuildCommand]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ConfigParseError('"buildConfig" must be an object')

    commands = {}
    for tool, template in value.items():
        if not isinstance(template, dict) or not template.get("buildFile"):
            raise ConfigParseError(f'buildConfig "{tool}" has no buildFile')
        args = template.get("buildArgs") or []
        if not isinstance(args, list):
            raise ConfigParseError(f'buildConfig "{tool}" buildArgs must be an array')
        commands[tool] = BuildCommand(
            build_file=template["buildFile"],
            build_args=tuple(str(a) for a in args),
        )
    return commands


def _warn_duplicates(kind: str, names: List[str]) -> None:
    seen = set()
    for name in names:
        if name in seen:
            logger.warning("Duplicate {} name '{}' in configuration; the first entry is used", kind, name)
        seen.add(name)
