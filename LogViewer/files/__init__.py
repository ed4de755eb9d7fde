"""
Files Package - Log file access

- loader: read_log_file, LogData, LogFileReadError
- file_watch: LogFileWatcher (watchdog based reload trigger)
"""
from .loader import LogData, LogFileReadError, is_log_file, read_log_file
from .file_watch import LogFileWatcher

__all__ = [
    'LogData',
    'LogFileReadError',
    'LogFileWatcher',
    'is_log_file',
    'read_log_file',
]
