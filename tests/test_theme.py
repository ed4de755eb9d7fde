import pytest

from LogViewer.storage.theme import (
    Theme,
    ThemeStore,
    detect_system_theme,
    next_theme,
    resolve_theme,
)


@pytest.fixture
def store(tmp_path):
    return ThemeStore(tmp_path / "logviewer.db")


class TestTheme:

    @pytest.mark.parametrize("value, expected", [
        ("dark", Theme.DARK),
        ("LIGHT", Theme.LIGHT),
        (" auto ", Theme.AUTO),
        ("purple", Theme.AUTO),
        (None, Theme.AUTO),
    ])
    def test_parse(self, value, expected):
        assert Theme.parse(value) is expected

    def test_parse_custom_default(self):
        assert Theme.parse("purple", Theme.DARK) is Theme.DARK

    def test_next_theme_cycle(self):
        assert next_theme(Theme.DARK) is Theme.LIGHT
        assert next_theme(Theme.LIGHT) is Theme.AUTO
        assert next_theme(Theme.AUTO) is Theme.DARK


class TestResolveTheme:

    @pytest.mark.parametrize("colorfgbg, expected", [
        ("15;0", Theme.DARK),
        ("0;15", Theme.LIGHT),
        ("0;default;15", Theme.LIGHT),
        ("15;8", Theme.DARK),
        ("garbage", Theme.DARK),
    ])
    def test_detect_system_theme(self, colorfgbg, expected):
        assert detect_system_theme({"COLORFGBG": colorfgbg}) is expected

    def test_detect_without_hint(self):
        assert detect_system_theme({}) is Theme.DARK

    def test_explicit_themes(self):
        assert resolve_theme(Theme.DARK, {}) == "textual-dark"
        assert resolve_theme(Theme.LIGHT, {}) == "textual-light"

    def test_auto(self):
        assert resolve_theme(Theme.AUTO, {"COLORFGBG": "0;15"}) == "textual-light"
        assert resolve_theme(Theme.AUTO, {}) == "textual-dark"


class TestThemeStore:

    def test_default(self, store):
        assert store.get_theme() is Theme.AUTO

    def test_set_and_get(self, store):
        store.set_theme(Theme.LIGHT)
        assert store.get_theme() is Theme.LIGHT

    def test_persisted(self, tmp_path, store):
        store.set_theme(Theme.DARK)
        assert ThemeStore(tmp_path / "logviewer.db").get_theme() is Theme.DARK

    def test_unknown_stored_value(self, store):
        from LogViewer.database.database import Database

        with Database(store.db_path) as db:
            db.upsert("settings", {"key": "theme", "value": "neon"})
        assert store.get_theme() is Theme.AUTO
