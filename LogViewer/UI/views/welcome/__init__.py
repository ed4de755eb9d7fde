from .view import RecentFileItem, RecentFilesPanel, WelcomeScreen

__all__ = ['RecentFileItem', 'RecentFilesPanel', 'WelcomeScreen']
