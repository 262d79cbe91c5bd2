"""Options dataclass for the refresh command."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RefreshOptions:
    """Configuration options for a single refresh run."""

    # Target selection
    project: Optional[str] = None
    workspace: Optional[str] = None

    # Configuration
    config_path: Optional[str] = None

    # Behavior flags
    build: bool = False
    no_arguments: bool = False

    # External tools
    svn: str = "svn"
