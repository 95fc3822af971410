"""
User Preferences
================
The persisted sort mode of the place list.

The backing store is anything with QSettings' `value()` / `setValue()`
interface. The application passes a real `QSettings`; tests pass an INI file
in a temporary directory.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from PySide6.QtCore import QSettings

from californication.model.sorting import DEFAULT_SORT_MODE, SortMode

logger = logging.getLogger(__name__)

SORTING_TYPE_KEY = "sortingType"


class SettingsStore(Protocol):
    def value(self, key: str, defaultValue: Any = None) -> Any: ...
    def setValue(self, key: str, value: Any) -> None: ...
    def sync(self) -> None: ...


class SortPreference:
    """Reads and writes the sort mode under a fixed key."""

    def __init__(self, settings: Optional[SettingsStore] = None, key: str = SORTING_TYPE_KEY) -> None:
        self.settings = settings if settings is not None else QSettings()
        self.key = key

    def load(self) -> SortMode:
        raw = self.settings.value(self.key)
        if raw is None:
            return DEFAULT_SORT_MODE
        try:
            return SortMode(int(raw))
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid stored sort mode {raw!r}, using {DEFAULT_SORT_MODE.name}.")
            return DEFAULT_SORT_MODE

    def save(self, mode: SortMode) -> None:
        self.settings.setValue(self.key, int(mode))
        self.settings.sync()
        logger.debug(f"Sort mode preference saved: {mode.name}")
