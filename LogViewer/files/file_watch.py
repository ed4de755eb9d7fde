import os
from pathlib import Path
from typing import Callable, Optional, Union

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from LogViewer.util import get_logger


class LogFileEventHandler(FileSystemEventHandler):
    """Forwards created/modified events for one file to a callback"""

    def __init__(self, file_path: Union[str, Path], callback: Callable[[str, str], None]):
        super().__init__()
        self.file_path = os.path.abspath(str(file_path))
        self.callback = callback

    def _process_event(self, event_type, event):
        if event.is_directory:
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if any(p and os.path.abspath(os.fsdecode(p)) == self.file_path for p in paths):
            self.callback(event_type, self.file_path)

    def on_created(self, event):
        self._process_event("created", event)

    def on_modified(self, event):
        self._process_event("modified", event)

    def on_moved(self, event):
        self._process_event("moved", event)


class LogFileWatcher:
    """
    Watches the open log file so the viewer can reload it

    watchdog observes directories, so the file's parent directory is
    scheduled and events for other files are dropped by the handler.
    """

    def __init__(self, callback: Callable[[str, str], None]):
        self.callback = callback
        self.observer: Optional[Observer] = None
        self.watched_file: Optional[str] = None
        self.logger = get_logger('FileWatcher')

    @property
    def is_watching(self) -> bool:
        return self.observer is not None

    def watch(self, file_path: Union[str, Path]) -> bool:
        """
        Start watching file_path, replacing any previously watched file

        Returns:
            False if the file's directory does not exist
        """
        self.stop()

        file_path = os.path.abspath(str(file_path))
        directory = os.path.dirname(file_path)
        if not os.path.isdir(directory):
            self.logger.warning(f"Directory not found: {directory}")
            return False

        handler = LogFileEventHandler(file_path, self.callback)
        self.observer = Observer()
        self.observer.schedule(handler, directory, recursive=False)
        self.observer.start()
        self.watched_file = file_path
        self.logger.info(f"Started watching: {file_path}")
        return True

    def stop(self) -> None:
        if self.observer is None:
            return
        self.observer.stop()
        self.observer.join()
        self.logger.info(f"Stopped watching: {self.watched_file}")
        self.observer = None
        self.watched_file = None
