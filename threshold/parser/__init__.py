"""
Clock literal parser for threshold.

Provides lexical analysis and parsing of textual vector clocks such as
``{A:2, B:1}``, ``P1:2;P2:1`` or the positional form ``[2, 1]``.
"""
