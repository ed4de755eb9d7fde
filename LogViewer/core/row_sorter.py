"""
Row Sorter Module - Column sorting of table rows

Handles:
- Sort state transitions on header clicks
- Locale-aware ordering of cell values
- Ragged rows (missing cells sort before every present value)
"""
import locale
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, TypeVar

R = TypeVar("R", bound=Sequence[str])


class SortDirection(Enum):
    """Sort direction of the active column"""
    NONE = "none"
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def indicator(self) -> str:
        """Arrow shown next to the sorted column header"""
        indicators = {
            SortDirection.NONE: "",
            SortDirection.ASCENDING: "▲",
            SortDirection.DESCENDING: "▼",
        }
        return indicators[self]


@dataclass(frozen=True)
class SortState:
    """Which column the rows are sorted by, and in which direction"""
    column_index: Optional[int] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        return self.column_index is not None and self.direction is not SortDirection.NONE

    def click(self, column_index: int) -> "SortState":
        """
        Next state after the header of column_index is clicked

        The same column cycles none -> ascending -> descending -> none,
        a different column starts at ascending.
        """
        if column_index != self.column_index:
            return SortState(column_index, SortDirection.ASCENDING)

        cycle = {
            SortDirection.NONE: SortDirection.ASCENDING,
            SortDirection.ASCENDING: SortDirection.DESCENDING,
            SortDirection.DESCENDING: SortDirection.NONE,
        }
        return SortState(column_index, cycle[self.direction])

    def direction_for(self, column_index: int) -> SortDirection:
        """Direction shown on the header of column_index"""
        if column_index == self.column_index:
            return self.direction
        return SortDirection.NONE


def base_letters(value: str) -> str:
    """value case-folded with accents removed (É compares as e)"""
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def collation_key(value: str) -> Tuple[str, str, str]:
    """
    Ordering key of a cell value

    Base letters decide first whatever locale is active; the locale's
    collation (active once setlocale(LC_COLLATE) was called) then orders
    accents and case.
    """
    return base_letters(value), locale.strxfrm(value.casefold()), locale.strxfrm(value)


def _row_key(row: Sequence[str], column_index: int) -> Tuple[int, Tuple[str, str, str]]:
    if column_index < len(row):
        return 1, collation_key(row[column_index])
    return 0, ("", "", "")


def sort_rows(
    rows: Sequence[R],
    column_index: Optional[int],
    direction: SortDirection,
) -> List[R]:
    """
    Order rows by the value in column_index

    Args:
        rows: Rows to sort (left untouched)
        column_index: Column to compare, None for no sorting
        direction: ASCENDING, DESCENDING or NONE

    Returns:
        New list of rows; input order when direction is NONE
    """
    if direction is SortDirection.NONE or column_index is None:
        return list(rows)

    return sorted(
        rows,
        key=lambda row: _row_key(row, column_index),
        reverse=direction is SortDirection.DESCENDING,
    )
