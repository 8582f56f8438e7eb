"""User settings management for AIRAC Explorer.

This package provides persistent storage for preferences that should be
kept across sessions, such as page size and bookmarked cycles.
"""

from airac_explorer.settings.preferences import (
    MAX_RECENTLY_VIEWED,
    VIEW_MODES,
    UserPreferences,
    get_preferences,
    reset_preferences,
)

__all__ = [
    "MAX_RECENTLY_VIEWED",
    "UserPreferences",
    "VIEW_MODES",
    "get_preferences",
    "reset_preferences",
]
