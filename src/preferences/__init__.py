"""Preferences — настройки оболочки во внедряемом хранилище."""

from .store import (
    DEFAULT_USER_NAME,
    HOME_LAYOUT_KEY,
    THEME_KEY,
    USER_NAME_KEY,
    HomeLayout,
    InMemorySettingsStore,
    Preferences,
    SettingsStore,
    Theme,
)

__all__ = [
    "DEFAULT_USER_NAME",
    "HOME_LAYOUT_KEY",
    "THEME_KEY",
    "USER_NAME_KEY",
    "HomeLayout",
    "InMemorySettingsStore",
    "Preferences",
    "SettingsStore",
    "Theme",
]
