"""
Parser for clock literals.

Turns a token stream into a list of ``(actor, seq)`` pairs.  Mapping
literals keep their actors; positional literals number the actors from 1.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import sly

from threshold.parser.lexer import ClockLexer


class ParseError(Exception):
    """Exception raised for parsing errors."""

    pass


class _SLYParser(sly.Parser):
    """
    SLY-based parser for clock literals.

    Grammar:
        clock   : { entries } | { } | entries | [ seqs ] | [ ]
        entries : entries (, | ;) entry | entry
        entry   : actor : NUMBER
        actor   : NAME | NUMBER | STRING
        seqs    : seqs , NUMBER | NUMBER
    """

    tokens = ClockLexer.tokens
    start = "clock"

    # --- Clocks ---

    @_("LBRACE entries RBRACE")
    def clock(self, p):
        return p.entries

    @_("LBRACE RBRACE")
    def clock(self, p):
        return []

    @_("entries")
    def clock(self, p):
        return p.entries

    @_("LBRACKET seqs RBRACKET")
    def clock(self, p):
        return [(i, seq) for i, seq in enumerate(p.seqs, start=1)]

    @_("LBRACKET RBRACKET")
    def clock(self, p):
        return []

    # --- Mapping entries ---

    @_("entries separator entry")
    def entries(self, p):
        return p.entries + [p.entry]

    @_("entry")
    def entries(self, p):
        return [p.entry]

    @_("COMMA", "SEMI")
    def separator(self, p):
        return p[0]

    @_("actor COLON NUMBER")
    def entry(self, p):
        return (p.actor, p.NUMBER)

    @_("NAME", "NUMBER", "STRING")
    def actor(self, p):
        return p[0]

    # --- Positional sequences ---

    @_("seqs COMMA NUMBER")
    def seqs(self, p):
        return p.seqs + [p.NUMBER]

    @_("NUMBER")
    def seqs(self, p):
        return [p.NUMBER]

    def error(self, token):
        if token:
            raise ParseError(
                f"Syntax error at '{token.value}' " f"(type: {token.type}, index: {token.index})"
            )
        raise ParseError("Syntax error: unexpected end of clock")


class ClockParser:
    """
    Parser for clock literals.

    Wraps the SLY-based parser with a clean public interface.
    """

    def __init__(self) -> None:
        self._lexer = ClockLexer()
        self._parser = _SLYParser()

    def parse(self, text: str) -> List[Tuple[Any, int]]:
        """
        Parse a clock literal into ``(actor, seq)`` pairs.

        Args:
            text: The clock literal to parse.

        Returns:
            The entries in literal order (duplicates are not removed).

        Raises:
            ParseError: If the literal is syntactically invalid.
            LexerError: If the literal contains invalid characters.
        """
        text = text.strip()
        if not text:
            raise ParseError("Syntax error: empty clock")

        result = self._parser.parse(self._lexer.tokenize(text))
        if result is None:
            raise ParseError("Syntax error: could not parse clock")
        return result
