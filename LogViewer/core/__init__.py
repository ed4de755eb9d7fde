"""
Core Package - In-memory table engine of the log viewer

Package Structure:
- tokenizer: Raw text to LogTable
- matcher: Regex-or-literal search term compilation
- row_filter: Search filtering
- row_sorter: Sort state and column sorting
- highlighter: Matched/unmatched spans of a cell
- layout: Column visibility/width and expanded row state
- session: ViewerSession tying the above together
"""
from .tokenizer import LogTable, cell, tokenize
from .matcher import Matcher, MatchKind, compile_matcher
from .row_filter import filter_rows
from .row_sorter import SortDirection, SortState, sort_rows
from .highlighter import Span, highlight
from .layout import ColumnLayoutState, ExpandedRowState
from .session import SearchState, ViewerSession, level_of

__all__ = [
    'LogTable',
    'cell',
    'tokenize',
    'Matcher',
    'MatchKind',
    'compile_matcher',
    'filter_rows',
    'SortDirection',
    'SortState',
    'sort_rows',
    'Span',
    'highlight',
    'ColumnLayoutState',
    'ExpandedRowState',
    'SearchState',
    'ViewerSession',
    'level_of',
]
