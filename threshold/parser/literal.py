"""
Clock literal utilities.

Provides the module-level entry point used by
:meth:`VectorClock.from_string` and the clock file reader.
"""

from __future__ import annotations

from typing import Any, Dict

from threshold.parser.grammar import ClockParser, ParseError


_parser = ClockParser()


def parse_clock_literal(text: str) -> Dict[Any, int]:
    """
    Parse a clock literal into an actor -> sequence mapping.

    Args:
        text: A literal such as ``{A:2, B:1}``, ``A:2;B:1`` or ``[2, 1]``.

    Returns:
        The parsed mapping, zero entries included.

    Raises:
        ParseError: If the literal is malformed or names an actor twice.
        LexerError: If the literal contains invalid characters.
    """
    mapping: Dict[Any, int] = {}
    for actor, seq in _parser.parse(text):
        if actor in mapping:
            raise ParseError(f"Duplicate actor '{actor}' in clock '{text.strip()}'")
        mapping[actor] = seq
    return mapping
