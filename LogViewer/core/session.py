"""
Viewer Session Module - State of one open log table

Handles:
- Search state (term, case sensitivity)
- Filter-then-sort pipeline for the visible rows
- Sort, column layout and expanded row state with their reset triggers
- Log level classification of cells for colouring
"""
from dataclasses import dataclass
from typing import List, Optional

from .highlighter import Span, highlight
from .layout import ColumnLayoutState, DEFAULT_MIN_WIDTH, ExpandedRowState
from .row_filter import filter_rows
from .row_sorter import SortState, sort_rows
from .tokenizer import LogTable, Row, cell

# Checked in order, first hit wins
LEVEL_MARKERS = ("ERROR", "WARN", "INFO", "DEBUG")


@dataclass(frozen=True)
class SearchState:
    """Active search term; an empty term means no filtering or highlighting"""
    term: str = ""
    case_sensitive: bool = False


def level_of(value: str) -> Optional[str]:
    """Return the log level marker contained in value, if any"""
    for level in LEVEL_MARKERS:
        if level in value:
            return level
    return None


class ViewerSession:
    """
    One log table plus everything the user did to it

    Every mutator that changes which rows are visible, or their order,
    collapses the expanded row since its index would point elsewhere.
    """

    def __init__(self, table: Optional[LogTable] = None, file_path: Optional[str] = None,
                 table_width: int = 0, min_width: int = DEFAULT_MIN_WIDTH):
        self.table = table or LogTable()
        self.file_path = file_path
        self.search = SearchState()
        self.sort = SortState()
        self.layout = ColumnLayoutState(self.table.headers, table_width, min_width)
        self.expanded = ExpandedRowState()

    def load(self, table: LogTable, file_path: Optional[str] = None) -> None:
        """
        Replace the table

        Sort and column layout reset when the header set changes, so a reload
        of the same file keeps them. The expanded row always collapses.
        """
        if self.layout.sync_headers(table.headers):
            self.sort = SortState()
        self.table = table
        self.file_path = file_path
        self.expanded.reset()

    def set_search_term(self, term: str) -> None:
        if term != self.search.term:
            self.search = SearchState(term, self.search.case_sensitive)
            self.expanded.reset()

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        if case_sensitive != self.search.case_sensitive:
            self.search = SearchState(self.search.term, case_sensitive)
            self.expanded.reset()

    def click_header(self, column_index: int) -> SortState:
        self.sort = self.sort.click(column_index)
        self.expanded.reset()
        return self.sort

    def click_row(self, row_index: int) -> Optional[int]:
        return self.expanded.click(row_index)

    def visible_rows(self) -> List[Row]:
        """Rows to render: filtered by the search term, then sorted"""
        filtered = filter_rows(self.table.rows, self.search.term, self.search.case_sensitive)
        return sort_rows(filtered, self.sort.column_index, self.sort.direction)

    def expanded_row(self, rows: Optional[List[Row]] = None) -> Optional[Row]:
        if self.expanded.row_index is None:
            return None
        rows = self.visible_rows() if rows is None else rows
        if self.expanded.row_index < len(rows):
            return rows[self.expanded.row_index]
        return None

    def highlight(self, value: str) -> List[Span]:
        return highlight(value, self.search.term, self.search.case_sensitive)

    def row_details(self, row: Row) -> List[tuple]:
        """(header, value) for every header; missing cells are empty"""
        return [(header, cell(row, index)) for index, header in enumerate(self.table.headers)]

    @property
    def is_no_data(self) -> bool:
        return not self.table.rows

    def is_no_match(self, rows: Optional[List[Row]] = None) -> bool:
        rows = self.visible_rows() if rows is None else rows
        return not self.is_no_data and not rows
