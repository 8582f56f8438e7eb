"""User preference management.

This module manages display preferences, bookmarked cycles and the
recently viewed list.

Settings are stored in ~/.airac_explorer/settings.json under the
"preferences" key; other keys in the file are preserved on save.

Typical usage:
    from airac_explorer.settings import get_preferences

    prefs = get_preferences()
    prefs.toggle_bookmark("2501")
    prefs.set_items_per_page(48)
    prefs.save()
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from airac_explorer.core.resource_path import get_user_dir

logger = logging.getLogger(__name__)

VIEW_MODES = ["grid", "list"]

# Recently viewed list keeps only the newest entries
MAX_RECENTLY_VIEWED = 10

DEFAULT_SORT = "date-asc"


@dataclass
class UserPreferences:
    """User preferences with persistence.

    Attributes:
        view_mode: Listing layout ("grid" or "list").
        items_per_page: Page size for cycle listings (None = use the app config).
        sort_by: Sort order value (e.g., "date-asc").
        bookmarked_cycles: Bookmarked cycle identifiers, in insertion order.
        recently_viewed: Viewed cycle identifiers, most recent first.
    """

    view_mode: str = "grid"
    items_per_page: int | None = None
    sort_by: str = DEFAULT_SORT
    bookmarked_cycles: list[str] = field(default_factory=list)
    recently_viewed: list[str] = field(default_factory=list)
    _settings_path: Path = field(default_factory=lambda: get_user_dir() / "settings.json")
    _dirty: bool = field(default=False, repr=False)

    def set_view_mode(self, mode: str) -> None:
        """Set the listing layout.

        Args:
            mode: "grid" or "list". Other values are ignored.
        """
        if mode not in VIEW_MODES:
            logger.warning("Ignoring unknown view mode: %s", mode)
            return
        self.view_mode = mode
        self._dirty = True

    def set_items_per_page(self, count: int) -> None:
        """Set the page size (minimum 1)."""
        self.items_per_page = max(1, count)
        self._dirty = True

    def set_sort_by(self, order: str) -> None:
        """Set the sort order value."""
        self.sort_by = order
        self._dirty = True

    def is_bookmarked(self, identifier: str) -> bool:
        """Check if a cycle is bookmarked."""
        return identifier in self.bookmarked_cycles

    def add_bookmark(self, identifier: str) -> None:
        """Bookmark a cycle (no-op if already bookmarked)."""
        if identifier not in self.bookmarked_cycles:
            self.bookmarked_cycles.append(identifier)
            self._dirty = True

    def remove_bookmark(self, identifier: str) -> None:
        """Remove a bookmark if present."""
        if identifier in self.bookmarked_cycles:
            self.bookmarked_cycles.remove(identifier)
            self._dirty = True

    def toggle_bookmark(self, identifier: str) -> bool:
        """Toggle a bookmark.

        Args:
            identifier: Cycle identifier.

        Returns:
            True if the cycle is now bookmarked, False if it was removed.
        """
        if self.is_bookmarked(identifier):
            self.remove_bookmark(identifier)
            return False
        self.add_bookmark(identifier)
        return True

    def clear_bookmarks(self) -> None:
        """Remove all bookmarks."""
        self.bookmarked_cycles = []
        self._dirty = True

    def add_recently_viewed(self, identifier: str) -> None:
        """Record a viewed cycle at the front of the recent list."""
        others = [entry for entry in self.recently_viewed if entry != identifier]
        self.recently_viewed = [identifier, *others][:MAX_RECENTLY_VIEWED]
        self._dirty = True

    def clear_recently_viewed(self) -> None:
        """Forget all recently viewed cycles."""
        self.recently_viewed = []
        self._dirty = True

    def reset(self) -> None:
        """Restore default values (the settings path is kept)."""
        defaults = UserPreferences()
        self.view_mode = defaults.view_mode
        self.items_per_page = defaults.items_per_page
        self.sort_by = defaults.sort_by
        self.bookmarked_cycles = []
        self.recently_viewed = []
        self._dirty = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "view_mode": self.view_mode,
            "items_per_page": self.items_per_page,
            "sort_by": self.sort_by,
            "bookmarked_cycles": list(self.bookmarked_cycles),
            "recently_viewed": list(self.recently_viewed),
        }

    def load(self, path: Path | str | None = None) -> bool:
        """Load preferences from file.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.airac_explorer/settings.json.

        Returns:
            True if loaded successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        if not self._settings_path.exists():
            logger.info("No settings file found, using default preferences")
            return False

        try:
            with open(self._settings_path, encoding="utf-8") as f:
                data = json.load(f)

            prefs = data.get("preferences", {})

            mode = prefs.get("view_mode", self.view_mode)
            if mode in VIEW_MODES:
                self.view_mode = mode

            per_page = prefs.get("items_per_page", self.items_per_page)
            # null means no stored choice
            if per_page is None:
                self.items_per_page = None
            elif isinstance(per_page, int) and not isinstance(per_page, bool) and per_page > 0:
                self.items_per_page = per_page

            self.sort_by = str(prefs.get("sort_by", self.sort_by))
            self.bookmarked_cycles = [str(i) for i in prefs.get("bookmarked_cycles", [])]
            self.recently_viewed = [str(i) for i in prefs.get("recently_viewed", [])][
                :MAX_RECENTLY_VIEWED
            ]

            self._dirty = False
            logger.info("Loaded preferences from %s", self._settings_path)
            return True

        except Exception as e:
            logger.error("Failed to load preferences: %s", e)
            return False

    def save(self, path: Path | str | None = None) -> bool:
        """Save preferences to file.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.airac_explorer/settings.json.

        Returns:
            True if saved successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)

            # Load existing data to preserve other settings
            existing_data: dict[str, Any] = {}
            if self._settings_path.exists():
                with open(self._settings_path, encoding="utf-8") as f:
                    existing_data = json.load(f)

            existing_data["preferences"] = self.to_dict()

            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(existing_data, f, indent=2)

            self._dirty = False
            logger.info("Saved preferences to %s", self._settings_path)
            return True

        except Exception as e:
            logger.error("Failed to save preferences: %s", e)
            return False

    @property
    def settings_path(self) -> Path:
        """Path of the backing settings file."""
        return self._settings_path

    @property
    def is_dirty(self) -> bool:
        """Check if preferences have unsaved changes."""
        return self._dirty


# Global singleton instance
_global_preferences: UserPreferences | None = None


def get_preferences() -> UserPreferences:
    """Get the global preferences singleton.

    Returns:
        UserPreferences instance (loaded from disk on first call).
    """
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = UserPreferences()
        _global_preferences.load()
    return _global_preferences


def reset_preferences() -> None:
    """Reset the global preferences singleton.

    Useful for testing.
    """
    global _global_preferences
    _global_preferences = None
