"""Application configuration.

Defaults ship in config/airac.yaml. A user file at
~/.airac_explorer/config.yaml may override any key.

Typical usage:
    from airac_explorer.core.config import get_app_config

    config = get_app_config()
    page_size = config.default_page_size
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from airac_explorer.core.logging_system import get_logger
from airac_explorer.core.resource_path import get_config_path, get_user_dir

logger = get_logger(__name__)


@dataclass
class AppConfig:
    """Application-wide settings.

    Attributes:
        default_page_size: Page size used when no preference is stored.
        upcoming_count: Number of upcoming cycles reported in statistics.
        export_dir: Directory exports are written to (None = current directory).
        calendar_name: Calendar title used in iCalendar exports.
        sources: Files successfully loaded, in load order.
    """

    default_page_size: int = 24
    upcoming_count: int = 3
    export_dir: Path | None = None
    calendar_name: str = "AIRAC Cycles"
    sources: list[Path] = field(default_factory=list, repr=False)

    def load(self, path: Path | str) -> bool:
        """Overlay settings from a YAML file.

        Unknown keys and values of the wrong type are ignored.

        Args:
            path: YAML file to read.

        Returns:
            True if the file was read, False if missing or invalid.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("No config file at %s", path)
            return False

        try:
            with open(path, encoding="utf-8") as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Error loading config %s: %s", path, e)
            return False

        section = data.get("airac", data) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            logger.warning("Ignoring config %s: expected a mapping", path)
            return False

        self._apply(section)
        self.sources.append(path)
        logger.info("Loaded config from %s", path)
        return True

    def _apply(self, data: dict[str, Any]) -> None:
        known = {f.name for f in fields(self)} - {"sources"}
        for key, value in data.items():
            if key not in known:
                logger.warning("Unknown config key: %s", key)
                continue
            if key in ("default_page_size", "upcoming_count"):
                if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                    setattr(self, key, value)
                else:
                    logger.warning("Invalid value for %s: %r", key, value)
            elif key == "export_dir":
                self.export_dir = Path(value).expanduser() if value else None
            elif key == "calendar_name":
                self.calendar_name = str(value)


def load_app_config(user_path: Path | str | None = None) -> AppConfig:
    """Build a config from bundled defaults plus the user overlay.

    Args:
        user_path: User override file. Defaults to ~/.airac_explorer/config.yaml.

    Returns:
        Populated AppConfig.
    """
    config = AppConfig()
    config.load(get_config_path("airac.yaml"))
    config.load(user_path if user_path is not None else get_user_dir() / "config.yaml")
    return config


_global_config: AppConfig | None = None


def get_app_config() -> AppConfig:
    """Get the global application config singleton.

    Returns:
        AppConfig instance (loaded on first call).
    """
    global _global_config
    if _global_config is None:
        _global_config = load_app_config()
    return _global_config


def reset_app_config() -> None:
    """Reset the global config singleton.

    Useful for testing.
    """
    global _global_config
    _global_config = None
