"""
Highlighter Module - Split cell text into matched and unmatched spans
"""
from dataclasses import dataclass
from typing import List

from .matcher import compile_matcher


@dataclass(frozen=True)
class Span:
    """A run of cell text, flagged when it matched the search term"""
    matched: bool
    text: str


def highlight(cell_text: str, term: str, case_sensitive: bool = False) -> List[Span]:
    """
    Split cell_text around matches of term

    Joining the text of the returned spans always gives back cell_text.
    Matched and unmatched spans alternate: touching matches are merged into
    one span and empty spans are never produced (except for empty text).

    Args:
        cell_text: Text of one cell
        term: Active search term, regex first with literal fallback
        case_sensitive: Whether matching is case-sensitive

    Returns:
        List of Span objects, left to right
    """
    if not term:
        return [Span(False, cell_text)]

    matcher = compile_matcher(term, case_sensitive)
    spans: List[Span] = []
    position = 0
    for start, end in matcher.spans(cell_text):
        if start > position:
            spans.append(Span(False, cell_text[position:start]))
        if spans and spans[-1].matched and start == position:
            spans[-1] = Span(True, spans[-1].text + cell_text[start:end])
        else:
            spans.append(Span(True, cell_text[start:end]))
        position = end

    if position < len(cell_text):
        spans.append(Span(False, cell_text[position:]))

    return spans or [Span(False, cell_text)]


def has_match(spans: List[Span]) -> bool:
    return any(span.matched for span in spans)
