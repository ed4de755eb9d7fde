"""
Welcome View Module - Start screen

Handles:
- Open file entry point
- Recent files list (open on select)
- Clearing the recent files history
- Current theme display
"""
from typing import List

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Label, ListItem, ListView, Static


class RecentFileItem(ListItem):
    """List entry for one recent file"""

    def __init__(self, path: str):
        super().__init__(Label(path, markup=False))
        self.path = path


class RecentFilesPanel(Vertical):
    """Recently opened files with a clear button"""

    def compose(self) -> ComposeResult:
        with Horizontal(id="recent-files-header"):
            yield Label("[bold]Recent Files[/bold]", classes="panel-title")
            yield Button("Clear History", id="clear-history-btn", variant="default")
        yield ListView(id="recent-files-list")

    def set_files(self, paths: List[str]) -> None:
        list_view = self.query_one("#recent-files-list", ListView)
        list_view.clear()
        for path in paths:
            list_view.append(RecentFileItem(path))
        self.display = bool(paths)


class WelcomeScreen(Screen):
    """First screen shown when no file was given on the command line"""

    def compose(self) -> ComposeResult:
        with Vertical(id="welcome-card"):
            yield Label("[bold]Welcome to Log Viewer[/bold]", id="welcome-title")
            yield Label("A modern, fast log file viewer", id="welcome-subtitle")
            yield Button("Open File", id="open-file-btn", variant="primary")
            yield RecentFilesPanel(id="recent-files-panel")
            yield Static("", id="theme-indicator")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_recent_files()
        self.refresh_theme()

    def on_screen_resume(self) -> None:
        """Coming back from a viewer; the history may have changed"""
        self.refresh_recent_files()
        self.refresh_theme()

    def refresh_recent_files(self) -> None:
        panel = self.query_one("#recent-files-panel", RecentFilesPanel)
        panel.set_files(self.app.recent_files.load())

    def refresh_theme(self) -> None:
        theme = self.app.theme_store.get_theme()
        self.query_one("#theme-indicator", Static).update(f"Theme: {theme.value} (t to change)")

    @on(Button.Pressed, "#open-file-btn")
    def handle_open_file(self) -> None:
        self.app.action_open_file()

    @on(Button.Pressed, "#clear-history-btn")
    def handle_clear_history(self) -> None:
        self.app.recent_files.clear()
        self.refresh_recent_files()

    @on(ListView.Selected, "#recent-files-list")
    def handle_recent_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, RecentFileItem):
            self.app.open_log_file(event.item.path)
