"""
Lexical analyzer for clock literals.

Tokenizes clock literal strings into actor names, numbers, separators
and brackets that can be consumed by the parser.
"""

from __future__ import annotations

import re

import sly


# Actor names that print and parse without quotes
_NAME_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_\-\.]*"


class LexerError(Exception):
    """Exception raised for lexical analysis errors."""
    pass


class ClockLexer(sly.Lexer):
    """
    Lexical analyzer for clock literals.

    Token Types:
        NAME                - Actor identifiers
        STRING              - Quoted actor identifiers
        NUMBER              - Integers (actor ids or sequence numbers)
        COLON               - Actor/sequence delimiter
        COMMA, SEMI         - Entry separators
        LBRACE, RBRACE      - Mapping delimiters
        LBRACKET, RBRACKET  - Positional delimiters
    """

    tokens = {
        NAME, NUMBER, STRING,
        COLON, COMMA, SEMI,
        LBRACE, RBRACE,
        LBRACKET, RBRACKET,
    }

    # Ignored characters
    ignore = " \t"

    # Ignore newlines
    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    NAME = _NAME_PATTERN

    @_(r'"(?:[^"\\]|\\[\s\S])*"')
    def STRING(self, t):
        t.value = re.sub(r"\\(.)", r"\1", t.value[1:-1], flags=re.S)
        return t

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    COLON = r":"
    COMMA = r","
    SEMI = r";"
    LBRACE = r"\{"
    RBRACE = r"\}"
    LBRACKET = r"\["
    RBRACKET = r"\]"

    def error(self, t):
        """Handle invalid characters."""
        raise LexerError(
            f"Invalid character '{t.value[0]}' at index {self.index}"
        )


def format_actor(actor: object) -> str:
    """
    Render *actor* so that the lexer reads it back as the same value.

    Non-negative ints and names matching ``NAME`` print bare; any other
    string is double-quoted with ``\\`` and ``"`` escaped.  Actors of
    other types fall back to ``str(actor)`` and do not read back.
    """
    if isinstance(actor, int) and not isinstance(actor, bool) and actor >= 0:
        return str(actor)
    if isinstance(actor, str):
        if re.fullmatch(_NAME_PATTERN, actor):
            return actor
        escaped = actor.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(actor)
