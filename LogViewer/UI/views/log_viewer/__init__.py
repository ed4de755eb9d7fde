"""
Log Viewer Package - Table view of one whitespace-delimited log file

Package Structure:
- view: Screen orchestration (LogViewerScreen)
- components: UI panels and controls (LogSearchPanel, ColumnTogglePanel, etc.)
- log_table: Log row table widget (LogViewerTable)
"""
from .view import LogViewerScreen

from .components import (
    ColumnCheckbox,
    ColumnTogglePanel,
    EmptyState,
    LogSearchPanel,
    LogStatsPanel,
    RowDetailsPanel,
)
from .log_table import LogViewerTable, format_cell

__all__ = [
    # Main view
    'LogViewerScreen',

    # UI components
    'ColumnCheckbox',
    'ColumnTogglePanel',
    'EmptyState',
    'LogSearchPanel',
    'LogStatsPanel',
    'RowDetailsPanel',
    'LogViewerTable',
    'format_cell',
]
