"""
Open File Dialog - Modal file picker for log files
"""
from pathlib import Path
from typing import Iterable, Optional, Sequence

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Label

from LogViewer.files.loader import is_log_file


class LogDirectoryTree(DirectoryTree):
    """DirectoryTree listing folders and log files only"""

    def __init__(self, path, extensions: Sequence[str] = (".log",), **kwargs):
        self.extensions = list(extensions)
        super().__init__(path, **kwargs)

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [
            path for path in paths
            if not path.name.startswith(".") and (path.is_dir() or is_log_file(path, self.extensions))
        ]


class OpenFileDialog(ModalScreen[Optional[str]]):
    """Pick a log file; dismisses with its path, or None when cancelled"""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, start_directory: Optional[Path] = None,
                 extensions: Sequence[str] = (".log",), **kwargs):
        super().__init__(**kwargs)
        self.start_directory = start_directory or Path.cwd()
        self.extensions = extensions

    def compose(self) -> ComposeResult:
        with Vertical(id="open-file-dialog"):
            yield Label("[bold]Open Log File[/bold]", classes="panel-title")
            yield Input(placeholder="Path to a log file", id="open-file-path")
            yield LogDirectoryTree(self.start_directory, self.extensions, id="open-file-tree")
            with Horizontal(id="open-file-buttons"):
                yield Button("Open", id="open-file-confirm-btn", variant="primary")
                yield Button("Cancel", id="open-file-cancel-btn", variant="default")

    def on_mount(self) -> None:
        self.query_one("#open-file-path", Input).focus()

    @on(DirectoryTree.FileSelected)
    def handle_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.dismiss(str(event.path))

    @on(Input.Submitted, "#open-file-path")
    def handle_path_submitted(self, event: Input.Submitted) -> None:
        self._submit(event.value)

    @on(Button.Pressed, "#open-file-confirm-btn")
    def handle_confirm(self) -> None:
        self._submit(self.query_one("#open-file-path", Input).value)

    @on(Button.Pressed, "#open-file-cancel-btn")
    def handle_cancel(self) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self, value: str) -> None:
        value = value.strip()
        if value:
            self.dismiss(value)
        else:
            self.notify("Enter a file path or pick a file", severity="warning")
