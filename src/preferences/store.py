"""
Preferences — пользовательские настройки оболочки

Настройки хранятся во внедряемом key/value хранилище (SettingsStore)
с жизненным циклом "прочитать при загрузке, записать при изменении".

Ключи хранилища:
- theme        — system | light | dark (system = ключ удалён)
- home-layout  — grid | list
- user-name    — имя в приветствии
"""

import logging
from enum import Enum
from typing import Final, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


# =============================================================================
# КЛЮЧИ И ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

THEME_KEY: Final[str] = "theme"
HOME_LAYOUT_KEY: Final[str] = "home-layout"
USER_NAME_KEY: Final[str] = "user-name"

DEFAULT_USER_NAME: Final[str] = "Developer"


class Theme(str, Enum):
    """Тема оформления"""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class HomeLayout(str, Enum):
    """Раскладка главной страницы"""

    GRID = "grid"
    LIST = "list"


# =============================================================================
# STORE
# =============================================================================


@runtime_checkable
class SettingsStore(Protocol):
    """Протокол key/value хранилища настроек (аналог localStorage)."""

    def get(self, key: str) -> str | None:
        """Значение по ключу или None."""
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemorySettingsStore:
    """Хранилище настроек в памяти процесса."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)


# =============================================================================
# PREFERENCES
# =============================================================================


class Preferences:
    """
    Типизированные настройки поверх SettingsStore.

    Невалидные сохранённые значения читаются как значение по умолчанию.
    """

    def __init__(self, store: SettingsStore):
        self.store = store

    @property
    def theme(self) -> Theme:
        raw = self.store.get(THEME_KEY)
        try:
            return Theme(raw) if raw is not None else Theme.SYSTEM
        except ValueError:
            logger.warning("Ignoring unknown stored theme %r", raw)
            return Theme.SYSTEM

    @theme.setter
    def theme(self, value: Theme) -> None:
        theme = Theme(value)
        if theme is Theme.SYSTEM:
            self.store.remove(THEME_KEY)
        else:
            self.store.set(THEME_KEY, theme.value)
        logger.info("Theme set to %s", theme.value)

    @property
    def home_layout(self) -> HomeLayout:
        raw = self.store.get(HOME_LAYOUT_KEY)
        try:
            return HomeLayout(raw) if raw is not None else HomeLayout.GRID
        except ValueError:
            logger.warning("Ignoring unknown stored home layout %r", raw)
            return HomeLayout.GRID

    @home_layout.setter
    def home_layout(self, value: HomeLayout) -> None:
        layout = HomeLayout(value)
        self.store.set(HOME_LAYOUT_KEY, layout.value)
        logger.info("Home layout set to %s", layout.value)

    @property
    def user_name(self) -> str:
        # Пустое имя трактуется как отсутствующее
        return self.store.get(USER_NAME_KEY) or DEFAULT_USER_NAME

    @user_name.setter
    def user_name(self, value: str) -> None:
        self.store.set(USER_NAME_KEY, value)

    def theme_attribute(self) -> str | None:
        """Значение data-theme корневого элемента (None для system)."""
        theme = self.theme
        return None if theme is Theme.SYSTEM else theme.value
