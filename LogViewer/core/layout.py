"""
Layout Module - Column and row presentation state

Handles:
- Per-column visibility (at least one column always stays visible)
- Per-column width with clamping against the table width
- Reset when a file with a different header set is loaded
- Single expanded (detail) row
"""
from typing import Dict, List, Optional, Sequence, Tuple

DEFAULT_MIN_WIDTH = 100


class ColumnLayoutState:
    """
    Visibility and width of each column

    Widths are only stored for columns the user resized; a missing entry
    means "default width" and is left to the renderer.
    """

    def __init__(self, headers: Sequence[str] = (), table_width: int = 0,
                 min_width: int = DEFAULT_MIN_WIDTH):
        """
        Args:
            headers: Column headers of the current table
            table_width: Total width available to the table
            min_width: Smallest width any column can be given
        """
        self.headers: Tuple[str, ...] = tuple(headers)
        self.table_width = table_width
        self.min_width = min_width
        self.visibility: List[bool] = [True] * len(self.headers)
        self.widths: Dict[int, int] = {}

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def reset(self) -> None:
        """All columns visible, default widths"""
        self.visibility = [True] * len(self.headers)
        self.widths = {}

    def sync_headers(self, headers: Sequence[str]) -> bool:
        """
        Adopt a new header set, resetting if it differs from the current one

        Returns:
            True if the state was reset
        """
        headers = tuple(headers)
        if headers == self.headers:
            return False
        self.headers = headers
        self.reset()
        return True

    def visible_count(self) -> int:
        return sum(self.visibility)

    def is_visible(self, column_index: int) -> bool:
        if 0 <= column_index < len(self.visibility):
            return self.visibility[column_index]
        return False

    def visible_indices(self) -> List[int]:
        return [index for index, visible in enumerate(self.visibility) if visible]

    def toggle_visibility(self, column_index: int) -> bool:
        """
        Flip the visibility of one column

        Hiding the last visible column is rejected and leaves the state
        unchanged, as does an index outside the header set.

        Returns:
            True if the visibility changed
        """
        if not 0 <= column_index < len(self.visibility):
            return False
        if self.visibility[column_index] and self.visible_count() == 1:
            return False
        self.visibility[column_index] = not self.visibility[column_index]
        return True

    def max_width(self) -> int:
        """Widest a single column may be while every other keeps min_width"""
        return self.table_width - (self.column_count - 1) * self.min_width

    def clamp_width(self, width: int) -> int:
        return max(self.min_width, min(self.max_width(), width))

    def set_width(self, column_index: int, width: int) -> Optional[int]:
        """
        Store a clamped width for one column

        Returns:
            The width actually stored, None for an unknown column
        """
        if not 0 <= column_index < self.column_count:
            return None
        clamped = self.clamp_width(int(width))
        self.widths[column_index] = clamped
        return clamped

    def width_from_pointer(self, column_index: int, pointer_x: int) -> Optional[int]:
        """
        Resize a column from a drag position

        Args:
            column_index: Column whose right edge is being dragged
            pointer_x: Pointer position relative to the table's left edge
        """
        return self.set_width(column_index, pointer_x - column_index * self.min_width)

    def width_of(self, column_index: int, default: Optional[int] = None) -> Optional[int]:
        return self.widths.get(column_index, default)


class ExpandedRowState:
    """At most one row shown expanded; clicking it again collapses it"""

    def __init__(self):
        self.row_index: Optional[int] = None

    @property
    def is_expanded(self) -> bool:
        return self.row_index is not None

    def click(self, row_index: int) -> Optional[int]:
        """Apply a click on row_index and return the expanded row, if any"""
        if self.row_index == row_index:
            self.row_index = None
        else:
            self.row_index = row_index
        return self.row_index

    def reset(self) -> None:
        self.row_index = None
