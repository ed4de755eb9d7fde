"""
Matcher Module - Search term compilation

A search term is tried as a regular expression first. Terms that are not
valid regex syntax are matched literally instead, so a half-typed pattern
such as "(" still finds something and never raises.
"""
import re
from enum import Enum
from typing import Iterator, Tuple


class MatchKind(Enum):
    """How a search term is being matched"""
    REGEX = "regex"
    LITERAL = "literal"


class Matcher:
    """Compiled search term with the strategy that was selected for it"""

    def __init__(self, term: str, kind: MatchKind, pattern: "re.Pattern[str]"):
        self.term = term
        self.kind = kind
        self._pattern = pattern

    def __repr__(self) -> str:
        return f"Matcher({self.term!r}, {self.kind.value})"

    def search(self, text: str) -> bool:
        """True if the term occurs anywhere in text"""
        return self._pattern.search(text) is not None

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """
        Yield (start, end) of each match, left to right

        Zero-width matches are skipped; re.finditer already steps past them
        so the scan always terminates.
        """
        for match in self._pattern.finditer(text):
            start, end = match.span()
            if end > start:
                yield start, end


def compile_matcher(term: str, case_sensitive: bool = False) -> Matcher:
    """
    Build a Matcher for term

    Args:
        term: Search string typed by the user
        case_sensitive: Match case exactly when True

    Returns:
        REGEX matcher when term compiles, LITERAL matcher otherwise
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return Matcher(term, MatchKind.REGEX, re.compile(term, flags))
    except re.error:
        return Matcher(term, MatchKind.LITERAL, re.compile(re.escape(term), flags))
