"""Logging setup for AIRAC Explorer.

Wraps the standard library logging module. Configuration is a YAML
dictConfig document; a bundled default lives in config/logging.yaml.

Typical usage:
    from airac_explorer.core.logging_system import get_logger, initialize_logging

    initialize_logging(use_platform_dir=True)
    logger = get_logger(__name__)
    logger.info("Catalog ready")
"""

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from airac_explorer.core.resource_path import get_config_path, get_log_dir

ROOT_LOGGER_NAME = "airac_explorer"

DEFAULT_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        ROOT_LOGGER_NAME: {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

_initialized = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Logger name, normally the module's __name__.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _load_config(config_path: Path) -> dict[str, Any] | None:
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logging.getLogger(__name__).warning(
            "Failed to read logging config %s: %s", config_path, e
        )
        return None

    if not isinstance(config, dict):
        logging.getLogger(__name__).warning("Ignoring malformed logging config %s", config_path)
        return None
    return config


def _relocate_file_handlers(config: dict[str, Any], log_dir: Path) -> None:
    """Rewrite relative handler filenames so they land in log_dir."""
    for handler in config.get("handlers", {}).values():
        filename = handler.get("filename")
        if filename and not Path(filename).is_absolute():
            log_dir.mkdir(parents=True, exist_ok=True)
            handler["filename"] = str(log_dir / filename)


def _drop_file_handlers(config: dict[str, Any]) -> None:
    """Remove file handlers (used when no log directory was requested)."""
    handlers = config.get("handlers", {})
    file_handlers = {name for name, h in handlers.items() if "filename" in h}
    for name in file_handlers:
        del handlers[name]
    for logger_config in config.get("loggers", {}).values():
        if "handlers" in logger_config:
            logger_config["handlers"] = [
                h for h in logger_config["handlers"] if h not in file_handlers
            ]
    root = config.get("root")
    if root and "handlers" in root:
        root["handlers"] = [h for h in root["handlers"] if h not in file_handlers]


def initialize_logging(
    config_path: str | Path | None = None,
    use_platform_dir: bool = False,
    level: int | str | None = None,
) -> None:
    """Configure logging from a YAML file.

    Args:
        config_path: Path to a dictConfig YAML file. Defaults to the bundled
            config/logging.yaml; falls back to a console-only config when the
            file is missing or invalid.
        use_platform_dir: Write file handlers into the platform log directory.
            When False, file handlers are dropped and only console output remains.
        level: Optional level override for the airac_explorer logger.
    """
    global _initialized

    path = Path(config_path) if config_path else get_config_path("logging.yaml")
    config = _load_config(path) if path.exists() else None
    if config is None:
        config = copy.deepcopy(DEFAULT_CONFIG)

    if use_platform_dir:
        _relocate_file_handlers(config, get_log_dir())
    else:
        _drop_file_handlers(config)

    if level is not None:
        # Console handlers follow the override so --verbose is visible
        for handler in config.get("handlers", {}).values():
            if "filename" not in handler:
                handler["level"] = level
        config.setdefault("loggers", {}).setdefault(ROOT_LOGGER_NAME, {})["level"] = level

    logging.config.dictConfig(config)

    _initialized = True
    get_logger(__name__).debug("Logging initialized from %s", path)


def is_initialized() -> bool:
    """Check whether initialize_logging() has run."""
    return _initialized
