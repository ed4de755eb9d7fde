"""
Log Viewer Components Module - UI widgets and panels

Handles:
- Search controls
- Column visibility toggles
- Log statistics panel
- Expanded row details
- Empty state messages
"""
from typing import List, Sequence, Tuple

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Checkbox, Input, Label, Static

from LogViewer.core.highlighter import Span
from LogViewer.core.session import level_of

from .log_table import LEVEL_STYLES, spans_to_text

NO_LOGS_MESSAGE = (
    "No Logs Available\n\n"
    "There are no logs to display. Try opening a different log file or "
    "checking the file contents."
)

NO_MATCH_MESSAGE = (
    "No Matching Logs\n\n"
    "No logs match your search criteria. Try adjusting your search term or filters."
)

DETAILS_PLACEHOLDER = "Select a row to view details"


class LogSearchPanel(Horizontal):
    """Search controls for the log table"""

    def compose(self) -> ComposeResult:
        """Compose the search panel"""
        yield Label("[bold]Search:[/bold]", classes="control-label")
        yield Input(
            placeholder="Find in log (ctrl+f)",
            id="log-search-input"
        )
        yield Checkbox("Case sensitive", id="case-sensitive-checkbox")
        yield Button("Clear", id="clear-search-btn", variant="default")


class ColumnCheckbox(Checkbox):
    """Visibility toggle of one log table column"""

    def __init__(self, header: str, column_index: int, value: bool = True):
        super().__init__(header, value=value, classes="column-toggle")
        self.column_index = column_index


class ColumnTogglePanel(Horizontal):
    """One checkbox per column; unchecking hides the column"""

    def compose(self) -> ComposeResult:
        yield Label("[bold]Columns:[/bold]", classes="control-label")

    def set_columns(self, headers: Sequence[str], visibility: Sequence[bool]) -> None:
        """Replace the checkboxes with one per header"""
        for checkbox in self.query(ColumnCheckbox):
            checkbox.remove()
        if not headers:
            return
        self.mount(*[
            ColumnCheckbox(header, index, visibility[index])
            for index, header in enumerate(headers)
        ])

    def sync(self, visibility: Sequence[bool]) -> None:
        """Make checkbox values follow the layout state"""
        for checkbox in self.query(ColumnCheckbox):
            if checkbox.column_index < len(visibility):
                if checkbox.value != visibility[checkbox.column_index]:
                    checkbox.value = visibility[checkbox.column_index]


class LogStatsPanel(Static):
    """Row counts of the open file"""

    total_rows: reactive[int] = reactive(0)
    visible_rows: reactive[int] = reactive(0)
    error_count: reactive[int] = reactive(0)
    warning_count: reactive[int] = reactive(0)

    def render(self) -> Text:
        return Text.assemble(
            f"Total: {self.total_rows} | Visible: {self.visible_rows} | ",
            (f"Errors: {self.error_count}", "red"),
            " | ",
            (f"Warnings: {self.warning_count}", "yellow"),
        )

    def update_counts(self, rows: Sequence[Sequence[str]], visible: int) -> None:
        self.total_rows = len(rows)
        self.visible_rows = visible
        levels = [{level_of(value) for value in row} for row in rows]
        self.error_count = sum(1 for found in levels if "ERROR" in found)
        self.warning_count = sum(1 for found in levels if "WARN" in found)


class RowDetailsPanel(Vertical):
    """Detailed view of the expanded row"""

    def compose(self) -> ComposeResult:
        """Compose the details panel"""
        yield Label("[bold]Detailed Log Entry[/bold]", classes="panel-title")
        yield Static(DETAILS_PLACEHOLDER, id="row-details-content")

    def show_row(self, row_number: int, details: List[Tuple[str, List[Span]]]) -> None:
        """
        Display every header of a row with its (highlighted) value

        Args:
            row_number: 1-based position of the row in the table
            details: (header, spans of the value) per header
        """
        content = Text()
        content.append(f"Row {row_number}\n\n", style="bold reverse")
        for header, spans in details:
            value = "".join(span.text for span in spans)
            level = level_of(value)
            level_style = LEVEL_STYLES[level] if level else ""
            content.append(f"{header}\n", style="bold dim")
            content.append_text(spans_to_text(spans, level_style))
            content.append("\n\n")

        self.query_one("#row-details-content", Static).update(content)

    def clear_details(self) -> None:
        """Clear the details display"""
        self.query_one("#row-details-content", Static).update(DETAILS_PLACEHOLDER)


class EmptyState(Static):
    """Message shown in place of the table when there is nothing to list"""

    def show_no_logs(self) -> None:
        self.update(NO_LOGS_MESSAGE)

    def show_no_match(self) -> None:
        self.update(NO_MATCH_MESSAGE)
