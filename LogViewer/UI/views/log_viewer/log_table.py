"""
Log Table Module - DataTable for displaying log rows

Handles:
- Rendering the visible rows of a ViewerSession
- Search term highlighting inside cells
- Color-coded log levels
- Sort indicators on column headers
- Column widths from the column layout state
"""
from typing import List, Optional, Sequence

from rich.text import Text
from textual.coordinate import Coordinate
from textual.widgets import DataTable

from LogViewer.core.highlighter import Span, has_match
from LogViewer.core.session import ViewerSession, level_of
from LogViewer.core.tokenizer import Row, cell

LEVEL_STYLES = {
    "ERROR": "red",
    "WARN": "yellow",
    "INFO": "blue",
    "DEBUG": "grey50",
}

MATCH_STYLE = "black on yellow"


def spans_to_text(spans: Sequence[Span], style: str = "") -> Text:
    if not has_match(spans):
        return Text("".join(span.text for span in spans), style=style)
    text = Text(style=style)
    for span in spans:
        text.append(span.text, style=MATCH_STYLE if span.matched else None)
    return text


def format_cell(value: str, session: ViewerSession) -> Text:
    """
    Build the rich Text of one cell

    Args:
        value: Raw cell value
        session: Session holding the active search term

    Returns:
        Text with the level colour as base style and matches highlighted
    """
    level = level_of(value)
    return spans_to_text(session.highlight(value), LEVEL_STYLES[level] if level else "")


class LogViewerTable(DataTable):
    """
    DataTable showing the filtered and sorted rows of a log file

    Column keys are the original column indexes as strings, so headers can
    be mapped back to the table data whatever columns are hidden.
    """

    def __init__(self, **kwargs):
        """Initialize the log viewer table"""
        super().__init__(**kwargs)
        self.shown_rows: List[Row] = []
        self.column_indices: List[int] = []

    def on_mount(self) -> None:
        """Table configuration"""
        self.cursor_type = "cell"
        self.zebra_stripes = True

    def render_session(self, session: ViewerSession, rows: Optional[List[Row]] = None) -> None:
        """
        Rebuild columns and rows from the session state

        Args:
            session: Session to display
            rows: Already computed visible rows, computed here if None
        """
        rows = session.visible_rows() if rows is None else rows
        cursor = self.cursor_coordinate

        self.clear(columns=True)
        self.column_indices = session.layout.visible_indices()
        self.shown_rows = rows

        for index in self.column_indices:
            label = Text(session.table.headers[index], style="bold")
            indicator = session.sort.direction_for(index).indicator
            if indicator:
                label.append(f" {indicator}")
            self.add_column(label, width=session.layout.width_of(index), key=str(index))

        for position, row in enumerate(rows):
            cells = [format_cell(cell(row, index), session) for index in self.column_indices]
            self.add_row(*cells, key=str(position))

        if rows and self.column_indices:
            self.cursor_coordinate = cursor

    def original_column(self, display_index: int) -> Optional[int]:
        """Column index in the log table for a displayed column"""
        if 0 <= display_index < len(self.column_indices):
            return self.column_indices[display_index]
        return None

    def cursor_column_index(self) -> Optional[int]:
        """Log table column under the cursor"""
        if not self.column_indices:
            return None
        return self.original_column(self.cursor_coordinate.column)

    def column_width(self, column_index: int) -> Optional[int]:
        """Rendered width of a log table column, None if it is hidden"""
        for column in self.columns.values():
            if column.key.value == str(column_index):
                return column.content_width if column.auto_width else column.width
        return None

    def jump_to_top(self) -> None:
        """Jump to the first row"""
        if self.row_count > 0:
            self.cursor_coordinate = Coordinate(0, self.cursor_coordinate.column)

    def jump_to_bottom(self) -> None:
        """Jump to the last row"""
        if self.row_count > 0:
            self.cursor_coordinate = Coordinate(self.row_count - 1, self.cursor_coordinate.column)
