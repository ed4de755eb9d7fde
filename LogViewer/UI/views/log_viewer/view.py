"""
Log Viewer View Module - Main UI orchestration

Handles:
- Receiving the loaded file through the handoff channel
- Search, sort, column visibility and width coordination
- Expanded row details
- Reloading the file when it changes on disk
- Event handlers for all UI interactions
"""
from typing import Optional

from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Checkbox, DataTable, Footer, Header, Input

from LogViewer.core.session import ViewerSession
from LogViewer.files.file_watch import LogFileWatcher
from LogViewer.files.loader import LogData, LogFileReadError, read_log_file
from LogViewer.session.handoff import HandoffError
from LogViewer.util import display_name, get_logger

from .components import (
    ColumnCheckbox,
    ColumnTogglePanel,
    EmptyState,
    LogSearchPanel,
    LogStatsPanel,
    RowDetailsPanel,
)
from .log_table import LogViewerTable


class LogFileChanged(Message):
    """The watched log file changed on disk"""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path


class LogViewerScreen(Screen):
    """
    Table view of one log file

    Features:
    - Regex search with literal fallback and match highlighting
    - Header click sorting (ascending, descending, unsorted)
    - Column show/hide and resizing
    - Row details for the selected row
    - Auto-reload on file changes
    """

    BINDINGS = [
        Binding("ctrl+f", "focus_search", "Find"),
        Binding("escape", "close", "Back"),
        Binding("plus", "widen_column", "Widen column"),
        Binding("minus", "narrow_column", "Narrow column"),
        Binding("home", "jump_top", "Top", show=False),
        Binding("end", "jump_bottom", "Bottom", show=False),
    ]

    def __init__(self, session_id: str, **kwargs):
        """
        Args:
            session_id: Handoff channel carrying this screen's LogData
        """
        super().__init__(**kwargs)
        self.session_id = session_id
        self.session: Optional[ViewerSession] = None
        self.watcher: Optional[LogFileWatcher] = None
        self._search_timer: Optional[Timer] = None
        self.logger = get_logger('Viewer')

    def compose(self) -> ComposeResult:
        """Compose the log viewer layout"""
        yield Header()

        with Container(id="log-viewer-controls"):
            yield LogSearchPanel(id="log-search-panel")
            yield ColumnTogglePanel(id="column-toggle-panel")

        with Horizontal(id="log-viewer-content"):
            with Vertical(classes="main-panel", id="log-main-panel"):
                yield LogStatsPanel(id="log-stats-panel")
                yield LogViewerTable(id="log-viewer-table")
                yield EmptyState(id="log-empty-state")

            with Vertical(classes="right-panel", id="log-sidebar"):
                yield RowDetailsPanel(id="row-details-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Take the file data handed over by the opener"""
        config = self.app.config
        self.session = ViewerSession(
            table_width=config.default_table_width,
            min_width=config.min_column_width,
        )
        self.query_one("#row-details-panel").display = False

        # The opener sends before pushing this screen, so never wait
        try:
            data = self.app.channel.receive(self.session_id, timeout=0)
        except HandoffError as e:
            self.logger.error(str(e))
            self.notify("Failed to open file", severity="error")
            self._show_empty_state()
            return

        self.load_data(data)

    def on_unmount(self) -> None:
        """Clean up when the screen goes away"""
        if self.watcher:
            self.watcher.stop()
            self.watcher = None

        if self._search_timer:
            self._search_timer.stop()
            self._search_timer = None

        self.app.channel.discard(self.session_id)

    # Loading

    def load_data(self, data: LogData) -> None:
        """
        Show a freshly loaded file

        Args:
            data: Tokenized file content
        """
        same_file = self.session.file_path == data.file_path
        self.session.load(data.to_table(), data.file_path)

        name = display_name(data.file_path)
        self.title = f"Log Viewer - {name}"
        self.sub_title = data.file_path

        self.query_one("#column-toggle-panel", ColumnTogglePanel).set_columns(
            self.session.table.headers, self.session.layout.visibility
        )
        self._refresh_table()

        if not same_file:
            self._watch(data.file_path)

    def load_path(self, path: str) -> None:
        """Open another file in this screen"""
        try:
            data = read_log_file(path)
        except LogFileReadError as e:
            self.logger.error(str(e))
            self.notify("Failed to open file", severity="error")
            return

        self.app.recent_files.add(data.file_path)
        self.load_data(data)

    def _watch(self, file_path: str) -> None:
        if not self.app.config.auto_reload:
            return
        if self.watcher is None:
            self.watcher = LogFileWatcher(self._on_file_event)
        self.watcher.watch(file_path)

    def _on_file_event(self, event_type: str, path: str) -> None:
        """
        Watchdog thread callback

        Must not wait on the event loop: stopping the watcher joins the
        observer thread from the loop.
        """
        self.logger.info(f"File {event_type}: {path}")
        self.post_message(LogFileChanged(path))

    @on(LogFileChanged)
    def handle_file_changed(self, event: LogFileChanged) -> None:
        self._reload_file(event.path)

    @work(exclusive=True, thread=True)
    def _reload_file(self, path: str) -> None:
        """Re-read the file in a background thread"""
        try:
            data = read_log_file(path)
        except LogFileReadError as e:
            self.logger.warning(f"Reload failed: {e}")
            return
        self.app.call_from_thread(self._apply_reload, data)

    def _apply_reload(self, data: LogData) -> None:
        if self.session is None or data.file_path != self.session.file_path:
            return
        self.load_data(data)

    # Rendering

    def _refresh_table(self) -> None:
        """Re-render table, stats, details and empty state from the session"""
        session = self.session
        rows = session.visible_rows()

        table = self.query_one("#log-viewer-table", LogViewerTable)
        table.render_session(session, rows)

        stats = self.query_one("#log-stats-panel", LogStatsPanel)
        stats.update_counts(session.table.rows, len(rows))

        empty = self.query_one("#log-empty-state", EmptyState)
        if session.is_no_data:
            empty.show_no_logs()
        elif session.is_no_match(rows):
            empty.show_no_match()
        table.display = bool(rows)
        empty.display = not rows

        self._update_details(rows)

    def _show_empty_state(self) -> None:
        self.query_one("#log-viewer-table", LogViewerTable).display = False
        empty = self.query_one("#log-empty-state", EmptyState)
        empty.show_no_logs()
        empty.display = True

    def _update_details(self, rows=None) -> None:
        panel = self.query_one("#row-details-panel", RowDetailsPanel)
        row = self.session.expanded_row(rows)
        if row is None:
            panel.clear_details()
            panel.display = False
            return

        details = [
            (header, self.session.highlight(value))
            for header, value in self.session.row_details(row)
        ]
        panel.show_row(self.session.expanded.row_index + 1, details)
        panel.display = True

    # Event Handlers

    @on(Input.Changed, "#log-search-input")
    def handle_search_changed(self, event: Input.Changed) -> None:
        """Handle search input changes with debouncing"""
        if self._search_timer:
            self._search_timer.stop()

        value = event.value
        self._search_timer = self.set_timer(
            self.app.config.search_debounce,
            lambda: self._perform_search(value)
        )

    def _perform_search(self, term: str) -> None:
        """Execute the actual search operation (debounced)"""
        self._search_timer = None
        if self.session is None:
            return
        self.session.set_search_term(term)
        self._refresh_table()

    @on(Input.Submitted, "#log-search-input")
    def handle_search_submitted(self, event: Input.Submitted) -> None:
        """Enter applies the search without waiting for the debounce"""
        if self._search_timer:
            self._search_timer.stop()
        self._perform_search(event.value)

    @on(Button.Pressed, "#clear-search-btn")
    def handle_clear_search(self) -> None:
        """Handle clear search button"""
        search_input = self.query_one("#log-search-input", Input)
        search_input.value = ""
        if self._search_timer:
            self._search_timer.stop()
        self._perform_search("")

    @on(Checkbox.Changed, "#case-sensitive-checkbox")
    def handle_case_sensitive_changed(self, event: Checkbox.Changed) -> None:
        """Handle case sensitive checkbox"""
        if self.session is None:
            return
        self.session.set_case_sensitive(event.value)
        self._refresh_table()

    @on(Checkbox.Changed, ".column-toggle")
    def handle_column_toggled(self, event: Checkbox.Changed) -> None:
        """Show or hide a column; the last visible column cannot be hidden"""
        checkbox = event.checkbox
        if self.session is None or not isinstance(checkbox, ColumnCheckbox):
            return

        layout = self.session.layout
        if layout.is_visible(checkbox.column_index) == event.value:
            return

        if not layout.toggle_visibility(checkbox.column_index):
            self.notify("At least one column must stay visible", severity="warning")
        self.query_one("#column-toggle-panel", ColumnTogglePanel).sync(layout.visibility)
        self._refresh_table()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Header click cycles the sort of that column"""
        if self.session is None:
            return
        column_index = int(event.column_key.value)
        state = self.session.click_header(column_index)
        self.logger.info(f"Sort column {column_index} {state.direction.value}")
        self._refresh_table()

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        """Selecting a row toggles its details"""
        if self.session is None:
            return
        self.session.click_row(event.coordinate.row)
        self._update_details()

    def action_focus_search(self) -> None:
        search_input = self.query_one("#log-search-input", Input)
        search_input.focus()

    def action_close(self) -> None:
        self.dismiss()

    def action_widen_column(self) -> None:
        self._resize_cursor_column(self.app.config.width_step)

    def action_narrow_column(self) -> None:
        self._resize_cursor_column(-self.app.config.width_step)

    def _resize_cursor_column(self, delta: int) -> None:
        """Resize the column under the table cursor by delta cells"""
        if self.session is None:
            return
        table = self.query_one("#log-viewer-table", LogViewerTable)
        column_index = table.cursor_column_index()
        if column_index is None:
            return

        current = self.session.layout.width_of(column_index) or table.column_width(column_index)
        if current is None:
            return

        layout = self.session.layout
        layout.table_width = table.size.width or self.app.config.default_table_width
        layout.set_width(column_index, current + delta)
        self._refresh_table()

    def action_jump_top(self) -> None:
        self.query_one("#log-viewer-table", LogViewerTable).jump_to_top()

    def action_jump_bottom(self) -> None:
        self.query_one("#log-viewer-table", LogViewerTable).jump_to_bottom()
