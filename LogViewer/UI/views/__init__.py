"""
Log Viewer UI Views Package
"""

from .welcome import WelcomeScreen
from .log_viewer import LogViewerScreen
from .open_file import OpenFileDialog

__all__ = [
    'WelcomeScreen',
    'LogViewerScreen',
    'OpenFileDialog'
]
