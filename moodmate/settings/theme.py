#!/usr/bin/env python3
"""
theme.py
-----------------
Light/dark theme preference.

ThemePreference is an explicit context object passed to whatever needs the
theme. It is initialized once from storage (or the system preference when
nothing is stored) and changed only through toggle(), which persists the
new value.

Usage:
    from moodmate.settings.theme import ThemePreference

    preference = ThemePreference(storage)
    preference.theme          # Theme.LIGHT
    preference.toggle()       # Theme.DARK, persisted
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import os
from typing import Callable, Mapping, Optional

# --- Local imports ---
from moodmate.core.exceptions import PersistenceError
from moodmate.core.logging_manager import MoodMateLogger, safe_logger
from moodmate.models import Theme
from moodmate.storage.local_storage import LocalStorage

THEME_STORAGE_KEY = "moodMateTheme"


def detect_system_dark_mode(env: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal uses a dark background.

    Reads the COLORFGBG convention ("<fg>;<bg>"), where background colors
    0-6 and 8 are dark.
    """
    env = os.environ if env is None else env
    value = env.get("COLORFGBG", "")
    background = value.split(";")[-1] if value else ""
    if not background.isdigit():
        return False
    return int(background) in {0, 1, 2, 3, 4, 5, 6, 8}


class ThemePreference:
    """
    Theme context with a single mutation entry point.

    Attributes:
        storage: LocalStorage holding the preference
        prefers_dark: Callable reporting the system dark-mode preference
        logger: Optional logger
    """

    def __init__(
        self,
        storage: LocalStorage,
        prefers_dark: Callable[[], bool] = detect_system_dark_mode,
        logger: Optional[MoodMateLogger] = None,
    ) -> None:
        self.storage = storage
        self.prefers_dark = prefers_dark
        self.logger = logger
        self._theme: Optional[Theme] = None

    def load(self) -> Theme:
        """
        Initialize the theme.

        Returns:
            The stored theme, else the system preference, else light
        """
        stored = self._read_stored()
        if stored is not None:
            self._theme = stored
        else:
            self._theme = Theme.DARK if self.prefers_dark() else Theme.LIGHT
        return self._theme

    @property
    def theme(self) -> Theme:
        """Current theme, loading it on first access."""
        if self._theme is None:
            return self.load()
        return self._theme

    def toggle(self) -> Theme:
        """
        Switch between light and dark and persist the result.

        Returns:
            The new theme

        Raises:
            PersistenceError: If the preference cannot be written
        """
        new_theme = self.theme.opposite
        self.storage.set_item(THEME_STORAGE_KEY, json.dumps(new_theme.value))
        self._theme = new_theme
        safe_logger(self.logger).log_operation("toggle_theme", {"theme": new_theme.value})
        return new_theme

    def _read_stored(self) -> Optional[Theme]:
        try:
            raw = self.storage.get_item(THEME_STORAGE_KEY)
        except PersistenceError as e:
            safe_logger(self.logger).log_warning(
                "Stored theme unreadable, using system preference", {"error": str(e)}
            )
            return None
        if raw is None:
            return None
        try:
            return Theme(json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValueError):
            safe_logger(self.logger).log_warning(
                "Ignoring invalid stored theme", {"value": raw[:40]}
            )
            return None
