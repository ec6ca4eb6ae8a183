"""
Тесты настроек оболочки

Проверяет:
1. Значения по умолчанию при пустом хранилище
2. Тема system удаляет ключ из хранилища
3. Невалидные сохранённые значения читаются как значения по умолчанию
"""

import pytest

from src.preferences import (
    HOME_LAYOUT_KEY,
    THEME_KEY,
    USER_NAME_KEY,
    HomeLayout,
    InMemorySettingsStore,
    Preferences,
    SettingsStore,
    Theme,
)


@pytest.fixture
def store():
    return InMemorySettingsStore()


@pytest.fixture
def prefs(store):
    return Preferences(store)


class TestDefaults:
    """Значения по умолчанию"""

    def test_store_satisfies_protocol(self, store):
        assert isinstance(store, SettingsStore)

    def test_defaults(self, prefs):
        assert prefs.theme is Theme.SYSTEM
        assert prefs.home_layout is HomeLayout.GRID
        assert prefs.user_name == "Developer"
        assert prefs.theme_attribute() is None


class TestTheme:
    """Тесты темы"""

    def test_dark_persisted(self, prefs, store):
        prefs.theme = Theme.DARK
        assert store.get(THEME_KEY) == "dark"
        assert prefs.theme_attribute() == "dark"

    def test_system_removes_key(self, prefs, store):
        prefs.theme = "light"
        prefs.theme = Theme.SYSTEM
        assert store.get(THEME_KEY) is None
        assert THEME_KEY not in store.snapshot()

    def test_invalid_stored_theme(self):
        prefs = Preferences(InMemorySettingsStore({THEME_KEY: "neon"}))
        assert prefs.theme is Theme.SYSTEM

    def test_invalid_theme_rejected(self, prefs):
        with pytest.raises(ValueError):
            prefs.theme = "neon"


class TestLayoutAndName:
    """Тесты раскладки и имени"""

    def test_layout_roundtrip(self, prefs, store):
        prefs.home_layout = HomeLayout.LIST
        assert store.get(HOME_LAYOUT_KEY) == "list"
        assert prefs.home_layout is HomeLayout.LIST

    def test_invalid_stored_layout(self):
        prefs = Preferences(InMemorySettingsStore({HOME_LAYOUT_KEY: "masonry"}))
        assert prefs.home_layout is HomeLayout.GRID

    def test_user_name(self, prefs, store):
        prefs.user_name = "Ada"
        assert store.get(USER_NAME_KEY) == "Ada"
        assert prefs.user_name == "Ada"

    def test_empty_name_falls_back(self, prefs):
        prefs.user_name = ""
        assert prefs.user_name == "Developer"
