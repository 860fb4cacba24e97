"""
Shared utilities for the baluster calculator.

Provides the deterministic measurement tools used by the spacing solver and
the calculator API: glyph lookup tables, fraction text parsing and
formatting, and sixteenth-inch tolerance arithmetic.
"""

from .fractions import (
    Measurement,
    ParseError,
    ParseErrorKind,
    format_fraction,
    gcd,
    parse_fraction,
)
from .glyphs import FRACTION_GLYPHS, GLYPH_TABLE, VULGAR_GLYPHS, contains_glyph, glyph_value
from .tolerance import EPSILON, SIXTEENTHS, in_window, is_whole, round_half_up, round_to_unit

__all__ = [
    # types
    "Measurement",
    "ParseError",
    "ParseErrorKind",
    # glyphs
    "GLYPH_TABLE",
    "VULGAR_GLYPHS",
    "FRACTION_GLYPHS",
    "glyph_value",
    "contains_glyph",
    # fractions
    "parse_fraction",
    "format_fraction",
    "gcd",
    # tolerance
    "EPSILON",
    "SIXTEENTHS",
    "round_half_up",
    "round_to_unit",
    "is_whole",
    "in_window",
]
