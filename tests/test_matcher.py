import pytest

from LogViewer.core.matcher import MatchKind, compile_matcher
from LogViewer.core.row_filter import filter_rows, row_matches

ROWS = [
    ("10:00", "INFO", "started"),
    ("10:01", "ERROR", "disk"),
    ("10:02", "WARN", "slow"),
    ("10:03", "error", "again"),
]


class TestCompileMatcher:

    def test_valid_regex(self):
        matcher = compile_matcher("ERR.R")
        assert matcher.kind is MatchKind.REGEX
        assert matcher.search("an ERROR here")

    @pytest.mark.parametrize("term", ["(", "[abc", "*", "\\"])
    def test_invalid_regex_falls_back_to_literal(self, term):
        matcher = compile_matcher(term)
        assert matcher.kind is MatchKind.LITERAL
        assert matcher.search(f"x{term}y")
        assert not matcher.search("nothing")

    def test_case_insensitive_by_default(self):
        assert compile_matcher("error").search("ERROR")

    def test_case_sensitive(self):
        matcher = compile_matcher("error", case_sensitive=True)
        assert not matcher.search("ERROR")
        assert matcher.search("error")

    def test_literal_fallback_respects_case(self):
        assert compile_matcher("(A", case_sensitive=True).search("(A")
        assert not compile_matcher("(A", case_sensitive=True).search("(a")
        assert compile_matcher("(A").search("(a")

    def test_spans_skip_zero_width(self):
        assert list(compile_matcher("x*").spans("axxb")) == [(1, 3)]
        assert list(compile_matcher("^").spans("abc")) == []

    def test_spans_left_to_right(self):
        assert list(compile_matcher("ab").spans("ab-ab")) == [(0, 2), (3, 5)]


class TestFilterRows:

    def test_empty_term_returns_everything(self):
        result = filter_rows(ROWS, "")
        assert result == ROWS
        assert result is not ROWS

    def test_any_cell_matches(self):
        assert filter_rows(ROWS, "disk") == [ROWS[1]]
        assert filter_rows(ROWS, "10:0[23]") == [ROWS[2], ROWS[3]]

    def test_case_insensitive(self):
        assert filter_rows(ROWS, "error") == [ROWS[1], ROWS[3]]

    def test_case_sensitive(self):
        assert filter_rows(ROWS, "error", case_sensitive=True) == [ROWS[3]]

    def test_invalid_regex_matches_literally(self):
        rows = [("a(b",), ("ab",)]
        assert filter_rows(rows, "(") == [("a(b",)]

    def test_no_match(self):
        assert filter_rows(ROWS, "zzz") == []

    def test_keeps_input_order(self):
        result = filter_rows(ROWS, "1")
        assert result == [row for row in ROWS if any("1" in v for v in row)]

    def test_ragged_row(self):
        rows = [("only",), ("a", "b", "target")]
        assert filter_rows(rows, "target") == [rows[1]]
        assert filter_rows([()], "x") == []

    def test_row_matches(self):
        assert row_matches(("a", "b"), compile_matcher("b"))
        assert not row_matches(("a", "b"), compile_matcher("c"))
