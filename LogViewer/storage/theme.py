"""
Theme Module - Persisted colour theme preference

Handles:
- dark / light / auto preference stored in the settings table
- Resolving "auto" against the terminal's background colour
- Mapping preferences to Textual theme names
"""
import os
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Union

from LogViewer.database.database import Database
from LogViewer.util import get_logger

THEME_KEY = "theme"

TEXTUAL_THEMES = {
    "dark": "textual-dark",
    "light": "textual-light",
}

# xterm palette indexes that are dark backgrounds
_DARK_BACKGROUNDS = {0, 1, 2, 3, 4, 5, 6, 8}


class Theme(Enum):
    DARK = "dark"
    LIGHT = "light"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: Optional[str], default: "Theme" = None) -> "Theme":
        """Theme for value, or default (AUTO if not given) when unknown"""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default or cls.AUTO


def next_theme(theme: Theme) -> Theme:
    """dark -> light -> auto -> dark"""
    order = [Theme.DARK, Theme.LIGHT, Theme.AUTO]
    return order[(order.index(theme) + 1) % len(order)]


def detect_system_theme(env: Optional[Mapping[str, str]] = None) -> Theme:
    """
    Guess whether the terminal background is dark or light

    Reads COLORFGBG ("fg;bg" or "fg;other;bg"); dark when it is missing or
    unparseable.
    """
    env = os.environ if env is None else env
    value = env.get("COLORFGBG", "")
    if not value:
        return Theme.DARK
    try:
        background = int(value.split(";")[-1])
    except ValueError:
        return Theme.DARK
    return Theme.DARK if background in _DARK_BACKGROUNDS else Theme.LIGHT


def resolve_theme(theme: Theme, env: Optional[Mapping[str, str]] = None) -> str:
    """Textual theme name for a preference"""
    if theme is Theme.AUTO:
        theme = detect_system_theme(env)
    return TEXTUAL_THEMES[theme.value]


class ThemeStore:
    """Reads and writes the theme preference"""

    def __init__(self, db_path: Union[str, Path], default: Theme = Theme.AUTO):
        self.db_path = Path(db_path)
        self.default = default
        self.logger = get_logger('Theme')
        with Database(self.db_path) as db:
            db.create_tables()

    def get_theme(self) -> Theme:
        with Database(self.db_path) as db:
            row = db.read_one("settings", "key = ?", (THEME_KEY,))
        if row is None:
            return self.default
        return Theme.parse(row[1], self.default)

    def set_theme(self, theme: Theme) -> Theme:
        with Database(self.db_path) as db:
            db.upsert("settings", {"key": THEME_KEY, "value": theme.value})
        self.logger.info(f"Theme set to {theme.value}")
        return theme
