"""Resource path resolution.

Bundled resources (logging and application defaults) live inside the
package so they resolve the same way from a checkout and from an installed
wheel. Per-user files live under ~/.airac_explorer.
"""

import os
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent

USER_DIR_NAME = ".airac_explorer"


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a bundled resource.

    Args:
        relative_path: Path relative to the package root (e.g., "config/airac.yaml").

    Returns:
        Absolute path to the resource.
    """
    return PACKAGE_ROOT / relative_path


def get_config_path(filename: str = "") -> Path:
    """Get path to a bundled config file (or the config directory)."""
    return get_resource_path("config") / filename if filename else get_resource_path("config")


def get_user_dir() -> Path:
    """Get the per-user data directory (~/.airac_explorer)."""
    return Path.home() / USER_DIR_NAME


def get_log_dir() -> Path:
    """Get the platform-specific log directory.

    Returns:
        ~/Library/Logs/AiracExplorer on macOS, %LOCALAPPDATA%/AiracExplorer/logs
        on Windows, $XDG_STATE_HOME/airac_explorer/logs elsewhere.
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "AiracExplorer"
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
        if base:
            return Path(base) / "AiracExplorer" / "logs"
        return get_user_dir() / "logs"
    state_home = os.environ.get("XDG_STATE_HOME")
    base_dir = Path(state_home) if state_home else Path.home() / ".local" / "state"
    return base_dir / "airac_explorer" / "logs"
