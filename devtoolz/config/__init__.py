"""Configuration loading for refresh."""

from .loader import DEFAULT_CONFIG_PATH, load_config, parse_config
from .models import BuildCommand, Configuration, Project, Workspace

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "parse_config",
    "BuildCommand",
    "Configuration",
    "Project",
    "Workspace",
]
