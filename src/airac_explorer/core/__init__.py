"""Core infrastructure: configuration, errors, logging and resource paths."""

from airac_explorer.core.config import AppConfig, get_app_config, reset_app_config
from airac_explorer.core.errors import (
    AiracError,
    CatalogGenerationError,
    ExportError,
    InvalidCycleIdentifierError,
)
from airac_explorer.core.logging_system import get_logger, initialize_logging

__all__ = [
    "AiracError",
    "AppConfig",
    "CatalogGenerationError",
    "ExportError",
    "InvalidCycleIdentifierError",
    "get_app_config",
    "get_logger",
    "initialize_logging",
    "reset_app_config",
]
