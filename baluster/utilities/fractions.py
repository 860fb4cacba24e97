"""
Conversion between construction fraction text and decimal inches.

parse_fraction() accepts the ways people actually type measurements
("1½", "1 1/2", "1-1/2", "¾", "2.125", "2,125") and returns inches as a
float. format_fraction() goes the other way, rounding to the nearest
1/unit of an inch (sixteenths by default) and preferring vulgar glyphs for
halves, quarters and eighths.

All functions are pure. The only error raised is ParseError.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Callable, Union

from .glyphs import FRACTION_GLYPHS, GLYPH_TABLE, VULGAR_GLYPHS, contains_glyph
from .tolerance import EPSILON, SIXTEENTHS, round_half_up

Measurement = Union[str, int, float]


class ParseErrorKind(str, Enum):
    """Why a measurement string was rejected."""

    EMPTY = "empty"
    UNRECOGNIZED = "unrecognized"
    ZERO_DENOMINATOR = "zero_denominator"
    MALFORMED_TOKEN = "malformed_token"


class ParseError(ValueError):
    """Raised when text matches no recognised fraction or decimal form."""

    def __init__(self, text: str, kind: ParseErrorKind = ParseErrorKind.UNRECOGNIZED) -> None:
        super().__init__(f"Cannot parse fraction: {text}")
        self.text = text
        self.kind = kind


# ── Structural patterns ───────────────────────────────────────────────────────
#
# Tried in order, first match wins. Earlier patterns are more specific than
# the generic decimal conversion that follows them.

_GLYPH_CLASS = "[" + "".join(VULGAR_GLYPHS) + "]"

_MIXED_FRACTION = re.compile(r"^([0-9]+)[\s\-]+([0-9]+)/([0-9]+)$")
_MIXED_GLYPH = re.compile(rf"^([0-9]+)[\s\-]+({_GLYPH_CLASS})$")
_JOINED_GLYPH = re.compile(rf"^([0-9]+)({_GLYPH_CLASS})$")
_SIMPLE_FRACTION = re.compile(r"^([0-9]+)/([0-9]+)$")
_LONE_GLYPH = re.compile(rf"^({_GLYPH_CLASS})$")
_INTEGER = re.compile(r"^([0-9]+)$")
_DECIMAL = re.compile(r"^([0-9]+\.[0-9]+)$")


def _divide(numerator: str, denominator: str) -> float | None:
    den = int(denominator)
    if den == 0:
        return None
    return int(numerator) / den


def _mixed_fraction(m: re.Match[str]) -> float | None:
    fraction = _divide(m.group(2), m.group(3))
    if fraction is None:
        return None
    return int(m.group(1)) + fraction


def _mixed_glyph(m: re.Match[str]) -> float | None:
    return int(m.group(1)) + VULGAR_GLYPHS[m.group(2)]


def _simple_fraction(m: re.Match[str]) -> float | None:
    return _divide(m.group(1), m.group(2))


def _lone_glyph(m: re.Match[str]) -> float | None:
    return VULGAR_GLYPHS[m.group(1)]


def _number(m: re.Match[str]) -> float | None:
    return float(m.group(1))


_PATTERNS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], float | None]], ...] = (
    (_MIXED_FRACTION, _mixed_fraction),  # "1 1/2", "1-1/2"
    (_MIXED_GLYPH, _mixed_glyph),  # "1 ½", "1-½"
    (_JOINED_GLYPH, _mixed_glyph),  # "1½"
    (_SIMPLE_FRACTION, _simple_fraction),  # "1/2"
    (_LONE_GLYPH, _lone_glyph),  # "½"
    (_INTEGER, _number),  # "1"
    (_DECIMAL, _number),  # "1.5"
)


# ── Parsing ───────────────────────────────────────────────────────────────────


def _direct_conversion(text: str) -> float | None:
    """Whole-string decimal conversion; None unless it yields a finite number."""
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _accumulate_tokens(text: str) -> float | None:
    """
    Sum every number and glyph in text, left to right.

    Digits and decimal points build up a numeric buffer. A glyph flushes the
    buffer into the total and then adds its own value; whitespace or a hyphen
    only flushes. Any other character is skipped. Returns None if a buffered
    token is not a valid number (e.g. "1.2.3").
    """
    total = 0.0
    buffer = ""

    def flush() -> bool:
        nonlocal total, buffer
        if buffer:
            try:
                total += float(buffer)
            except ValueError:
                return False
            buffer = ""
        return True

    for char in text:
        if "0" <= char <= "9" or char == ".":
            buffer += char
        elif char in GLYPH_TABLE:
            if not flush():
                return None
            total += GLYPH_TABLE[char]
        elif char.isspace() or char == "-":
            if not flush():
                return None

    if not flush():
        return None
    return total


def parse_fraction(value: Measurement) -> float:
    """
    Convert a measurement to decimal inches.

    Args:
        value: Fraction or decimal text, or an int/float passed through as-is.

    Returns:
        The measurement in inches.

    Raises:
        ParseError: If the text matches no recognised form.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    original = str(value)
    text = original.strip().replace(",", ".", 1)
    if not text:
        raise ParseError(original, ParseErrorKind.EMPTY)

    for pattern, handler in _PATTERNS:
        m = pattern.match(text)
        if m:
            result = handler(m)
            if result is None:
                raise ParseError(original, ParseErrorKind.ZERO_DENOMINATOR)
            return result

    direct = _direct_conversion(text)
    if direct is not None:
        return direct

    if contains_glyph(text):
        accumulated = _accumulate_tokens(text)
        if accumulated is None:
            raise ParseError(original, ParseErrorKind.MALFORMED_TOKEN)
        return accumulated

    raise ParseError(original)


# ── Formatting ────────────────────────────────────────────────────────────────


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(a, 0) == a."""
    return a if b == 0 else gcd(b, a % b)


def format_fraction(value: float, unit: int = SIXTEENTHS) -> str:
    """
    Render inches as construction fraction text rounded to 1/unit.

    Examples (unit=16): 1.5 → "1 ½", 0.75 → "¾", 4.0 → "4",
    2.1875 → "2 3/16", 0.0625 → "1/16".

    Raises:
        ValueError: If unit < 1.
    """
    if unit < 1:
        raise ValueError(f"unit must be >= 1, got {unit}")

    whole = math.floor(value)
    remainder = value - whole
    if abs(remainder) < EPSILON:
        return str(whole)

    numerator = round_half_up(remainder * unit)
    divisor = gcd(numerator, unit)
    num, den = numerator // divisor, unit // divisor

    glyph = FRACTION_GLYPHS.get((num, den))
    if glyph is not None:
        return glyph if whole == 0 else f"{whole} {glyph}"

    if den == 1:
        return str(whole + num)

    if whole == 0:
        return f"{num}/{den}"
    return f"{whole} {num}/{den}"
