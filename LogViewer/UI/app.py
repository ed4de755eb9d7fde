"""
Log Viewer Main Application - Terminal log file viewer using Textual
"""
from pathlib import Path
from typing import Optional

from textual.app import App

from LogViewer.config import ViewerConfig, load_config
from LogViewer.files.loader import LogFileReadError, read_log_file
from LogViewer.session.handoff import HandoffChannel, HandoffError, new_session_id
from LogViewer.storage.recent_files import RecentFiles
from LogViewer.storage.theme import Theme, ThemeStore, next_theme, resolve_theme
from LogViewer.util import configure_logging, get_logger
from LogViewer.UI.views.log_viewer import LogViewerScreen
from LogViewer.UI.views.open_file import OpenFileDialog
from LogViewer.UI.views.welcome import WelcomeScreen


class LogViewerApp(App):
    """Whitespace-delimited log file viewer - Terminal UI Application"""

    TITLE = "Log Viewer"
    CSS_PATH = "logviewer.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+o", "open_file", "Open File"),
        ("t", "cycle_theme", "Theme"),
    ]

    def __init__(self, config: Optional[ViewerConfig] = None, initial_path: Optional[str] = None, **kwargs):
        """
        Args:
            config: Settings, loaded from the data directory if None
            initial_path: Log file to open right away
        """
        super().__init__(**kwargs)
        self.config = config or load_config()
        configure_logging(self.config.log_dir)
        self.logger = get_logger('App')

        self.recent_files = RecentFiles(self.config.db_path, self.config.max_recent_files)
        self.theme_store = ThemeStore(self.config.db_path, Theme.parse(self.config.default_theme))
        self.channel = HandoffChannel()
        self.initial_path = initial_path

    def get_default_screen(self) -> WelcomeScreen:
        return WelcomeScreen()

    def on_mount(self) -> None:
        self.apply_theme(self.theme_store.get_theme())
        if self.initial_path:
            self.open_log_file(self.initial_path)

    def apply_theme(self, theme: Theme) -> None:
        self.theme = resolve_theme(theme)

    def open_log_file(self, path: str) -> None:
        """
        Read a log file and show it in a viewer screen

        The current viewer is reused; from any other screen a new viewer is
        pushed and handed the data through the handoff channel.
        """
        if isinstance(self.screen, LogViewerScreen):
            self.screen.load_path(path)
            return

        try:
            data = read_log_file(path)
        except LogFileReadError as e:
            self.logger.error(str(e))
            self.notify("Failed to open file", severity="error")
            return

        self.recent_files.add(data.file_path)
        session_id = new_session_id()
        try:
            self.channel.send(session_id, data)
        except HandoffError as e:
            self.logger.error(str(e))
            self.notify("Failed to open file", severity="error")
            return

        self.logger.info(f"Opening viewer for {data.file_path}")
        self.push_screen(LogViewerScreen(session_id))

    def action_open_file(self) -> None:
        """Show the open file dialog"""
        start = Path.cwd()
        recent = self.recent_files.load()
        if recent and Path(recent[0]).parent.is_dir():
            start = Path(recent[0]).parent

        def handle_result(path: Optional[str]) -> None:
            if path:
                self.open_log_file(path)

        self.push_screen(OpenFileDialog(start, self.config.log_extensions), handle_result)

    def action_cycle_theme(self) -> None:
        """dark -> light -> auto"""
        theme = self.theme_store.set_theme(next_theme(self.theme_store.get_theme()))
        self.apply_theme(theme)
        self.notify(f"Theme: {theme.value}")
        if isinstance(self.screen, WelcomeScreen):
            self.screen.refresh_theme()


def run_app(initial_path: Optional[str] = None) -> None:
    """Entry point to run the log viewer application"""
    app = LogViewerApp(initial_path=initial_path)
    app.run()


if __name__ == "__main__":
    run_app()
