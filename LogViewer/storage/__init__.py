"""
Storage Package - Small persisted user preferences

- recent_files: RecentFiles (bounded most-recent-first list)
- theme: ThemeStore, Theme and theme resolution helpers
"""
from .recent_files import RecentFiles
from .theme import Theme, ThemeStore, detect_system_theme, next_theme, resolve_theme

__all__ = [
    'RecentFiles',
    'Theme',
    'ThemeStore',
    'detect_system_theme',
    'next_theme',
    'resolve_theme',
]
