"""
Row Filter Module - Search term filtering of table rows
"""
from typing import List, Sequence, TypeVar

from .matcher import Matcher, compile_matcher

R = TypeVar("R", bound=Sequence[str])


def row_matches(row: Sequence[str], matcher: Matcher) -> bool:
    """True if any cell of row contains a match"""
    return any(matcher.search(value) for value in row)


def filter_rows(rows: Sequence[R], term: str, case_sensitive: bool = False) -> List[R]:
    """
    Select the rows where at least one cell matches term

    Args:
        rows: Rows to filter (left untouched)
        term: Search term, regex first with literal fallback
        case_sensitive: Whether matching is case-sensitive

    Returns:
        New list holding the matching rows in their original order
    """
    if not term:
        return list(rows)

    matcher = compile_matcher(term, case_sensitive)
    return [row for row in rows if row_matches(row, matcher)]
