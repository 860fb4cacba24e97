"""
Glyph lookup tables for construction fraction text.

Both tables are module-level MappingProxyType constants built once at import
time. Nothing writes to them afterwards, so they are safe to share between
concurrent callers.
"""

from __future__ import annotations

from types import MappingProxyType

VULGAR_GLYPHS: MappingProxyType[str, float] = MappingProxyType(
    {
        "½": 0.5,
        "¼": 0.25,
        "¾": 0.75,
        "⅛": 0.125,
        "⅜": 0.375,
        "⅝": 0.625,
        "⅞": 0.875,
    }
)

# Superscript and subscript digits carry their face value. They only take
# effect through the token-accumulation fallback in the parser.
_SUPERSCRIPT_DIGITS = "¹²³⁴⁵⁶⁷⁸⁹"
_SUBSCRIPT_DIGITS = "₁₂₃₄₅₆₇₈₉"

GLYPH_TABLE: MappingProxyType[str, float] = MappingProxyType(
    {
        **VULGAR_GLYPHS,
        **{glyph: float(i) for i, glyph in enumerate(_SUPERSCRIPT_DIGITS, start=1)},
        **{glyph: float(i) for i, glyph in enumerate(_SUBSCRIPT_DIGITS, start=1)},
    }
)

# (numerator, denominator) in lowest terms → glyph, for halves, quarters and eighths
FRACTION_GLYPHS: MappingProxyType[tuple[int, int], str] = MappingProxyType(
    {
        (1, 2): "½",
        (1, 4): "¼",
        (3, 4): "¾",
        (1, 8): "⅛",
        (3, 8): "⅜",
        (5, 8): "⅝",
        (7, 8): "⅞",
    }
)


def glyph_value(char: str) -> float | None:
    """Return the numeric value of a single glyph, or None if it is not one."""
    return GLYPH_TABLE.get(char)


def contains_glyph(text: str) -> bool:
    """True if any character of text is a registered glyph."""
    return any(char in GLYPH_TABLE for char in text)
