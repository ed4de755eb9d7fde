"""
Tokenizer Module - Whitespace-delimited log text to table

Handles:
- Blank line removal
- Header extraction from the first line
- Row splitting on whitespace runs (ragged rows preserved)
"""
from dataclasses import dataclass, field
from typing import Sequence, Tuple


Row = Tuple[str, ...]


@dataclass(frozen=True)
class LogTable:
    """Headers and rows of a loaded log file"""
    headers: Tuple[str, ...] = ()
    rows: Tuple[Row, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when the source had no non-blank lines"""
        return not self.headers

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def __len__(self) -> int:
        return len(self.rows)


def cell(row: Sequence[str], index: int, default: str = "") -> str:
    """Return row[index], or default when the row is too short"""
    if 0 <= index < len(row):
        return row[index]
    return default


def split_fields(line: str) -> Row:
    """Split a line on whitespace runs, dropping empty tokens"""
    return tuple(line.split())


def tokenize(raw_text: str) -> LogTable:
    """
    Turn raw file text into a LogTable

    The first non-blank line is the header line, every following non-blank
    line becomes one row. A value containing a space is split into several
    cells; there is no quoting.

    Args:
        raw_text: Full text of the log file

    Returns:
        LogTable, empty (no headers, no rows) when every line is blank
    """
    lines = [line for line in raw_text.split("\n") if line.strip()]
    if not lines:
        return LogTable()

    headers = split_fields(lines[0])
    rows = tuple(split_fields(line) for line in lines[1:])
    return LogTable(headers=headers, rows=rows)
