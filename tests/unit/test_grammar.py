"""
Tests for the clock literal parser.

Tests cover mapping literals with and without braces, mixed
separators, positional literals, integer actors, duplicate detection
and syntax errors.
"""

import pytest

from threshold.parser.grammar import ClockParser, ParseError
from threshold.parser.lexer import LexerError
from threshold.parser.literal import parse_clock_literal


@pytest.fixture
def parser() -> ClockParser:
    """Return a fresh parser instance."""
    return ClockParser()


class TestMappingLiterals:
    """Test actor:seq literals."""

    def test_braced(self, parser: ClockParser) -> None:
        assert parser.parse("{A:2, B:1}") == [("A", 2), ("B", 1)]

    def test_bare(self, parser: ClockParser) -> None:
        assert parser.parse("A:2;B:1") == [("A", 2), ("B", 1)]

    def test_mixed_separators(self, parser: ClockParser) -> None:
        assert parser.parse("A:1, B:2; C:3") == [("A", 1), ("B", 2), ("C", 3)]

    def test_single_entry(self, parser: ClockParser) -> None:
        assert parser.parse("P1:5") == [("P1", 5)]

    def test_integer_actors(self, parser: ClockParser) -> None:
        assert parser.parse("{0:4, 1:2}") == [(0, 4), (1, 2)]

    def test_empty_braces(self, parser: ClockParser) -> None:
        assert parser.parse("{}") == []

    def test_zero_entries_kept(self, parser: ClockParser) -> None:
        assert parser.parse("A:0") == [("A", 0)]

    def test_quoted_actors(self, parser: ClockParser) -> None:
        assert parser.parse('{"n/1":3, "1":2, 1:4}') == [("n/1", 3), ("1", 2), (1, 4)]


class TestPositionalLiterals:
    """Test [seq, ...] literals."""

    def test_positional(self, parser: ClockParser) -> None:
        assert parser.parse("[10, 5, 5]") == [(1, 10), (2, 5), (3, 5)]

    def test_single(self, parser: ClockParser) -> None:
        assert parser.parse("[7]") == [(1, 7)]

    def test_empty_brackets(self, parser: ClockParser) -> None:
        assert parser.parse("[]") == []


class TestSyntaxErrors:
    """Test malformed literals."""

    @pytest.mark.parametrize(
        "text",
        [
            "A:1 B:2",
            "{A:1",
            "A:1}",
            "A:",
            ":1",
            "A:1;",
            "[1; 2]",
            "[A:1]",
            "{A:1]",
            "A",
        ],
    )
    def test_malformed(self, parser: ClockParser, text: str) -> None:
        with pytest.raises(ParseError):
            parser.parse(text)

    def test_empty(self, parser: ClockParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("   ")

    def test_lexer_error_propagates(self, parser: ClockParser) -> None:
        with pytest.raises(LexerError):
            parser.parse("A:1 & B:2")


class TestParseClockLiteral:
    """Test the module-level entry point."""

    def test_returns_mapping(self) -> None:
        assert parse_clock_literal("A:2;B:1") == {"A": 2, "B": 1}

    def test_duplicate_actor_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_clock_literal("{A:1, B:2, A:3}")

    def test_positional_mapping(self) -> None:
        assert parse_clock_literal("[3, 0, 1]") == {1: 3, 2: 0, 3: 1}
