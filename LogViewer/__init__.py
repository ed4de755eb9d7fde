"""
Log Viewer - Terminal viewer for whitespace-delimited log files
"""
__version__ = "0.1.0"
