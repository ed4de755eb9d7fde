"""
Log Viewer UI Package
"""
from .app import LogViewerApp, run_app

__all__ = ['LogViewerApp', 'run_app']
