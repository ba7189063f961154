"""Tests for token source locations."""

from __future__ import annotations

from socialscan.lexer import Lexer
from socialscan.location import SourceLocation


class TestOffsets:
    """Absolute offsets into the source."""

    def test_offsets_slice_back_to_value(self) -> None:
        source = "hey @you, see https://x.io/a and #tags+more"
        for token in Lexer(source).tokenize():
            loc = token.location
            assert source[loc.offset : loc.end_offset] == token.value

    def test_link_offset_starts_at_scheme(self) -> None:
        token = next(Lexer("go https://x").tokenize())
        assert token.location.offset == 3
        assert token.location.end_offset == 12
        assert token.location.length == 9

    def test_lone_marker_length(self) -> None:
        token = next(Lexer("# ").tokenize())
        assert token.location.offset == 0
        assert token.location.end_offset == 1


class TestLineColumn:
    """1-indexed line and column tracking."""

    def test_first_line(self) -> None:
        token = next(Lexer("hi @you").tokenize())
        assert (token.lineno, token.col) == (1, 4)

    def test_after_newline(self) -> None:
        tokens = list(Lexer("#one\n  #two\n\n@three").tokenize())
        assert [(t.lineno, t.col) for t in tokens] == [(1, 1), (2, 3), (4, 1)]

    def test_after_link(self) -> None:
        tokens = list(Lexer("http://a.b/c #x").tokenize())
        assert [(t.lineno, t.col) for t in tokens] == [(1, 1), (1, 14)]

    def test_column_counts_code_points(self) -> None:
        token = next(Lexer("🎉é #x").tokenize())
        assert token.col == 4

    def test_location_str(self) -> None:
        token = list(Lexer("a\nb #c").tokenize())[0]
        assert str(token.location) == "2:3"


class TestLocationObject:
    """SourceLocation and the lazy cache on Token."""

    def test_location_cached(self) -> None:
        token = next(Lexer("#a").tokenize())
        assert token.location is token.location

    def test_location_fields(self) -> None:
        token = next(Lexer("x\n @y").tokenize())
        assert token.location == SourceLocation(
            lineno=2, col_offset=2, offset=3, end_offset=5
        )

    def test_cache_excluded_from_equality(self) -> None:
        a = next(Lexer("#a").tokenize())
        b = next(Lexer("#a").tokenize())
        _ = a.location
        assert a == b

    def test_repr_truncates(self) -> None:
        token = next(Lexer("#" + "x" * 40).tokenize())
        assert repr(token) == "Token(TAG, '#xxxxxxxxxxxxxxxx...', 1:1)"
