"""
Floating-point tolerance helpers for sixteenth-inch arithmetic.

Spans and thicknesses arrive as binary floats, so quantities that are
"exactly" a whole number of sixteenths come out a hair off. Every
comparison against a grid or a window boundary goes through these helpers
with an explicit epsilon.
"""

from __future__ import annotations

import math

EPSILON: float = 1e-4
SIXTEENTHS: int = 16


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_to_unit(value: float, unit: int = SIXTEENTHS) -> float:
    """Round inches to the nearest 1/unit of an inch."""
    return round_half_up(value * unit) / unit


def is_whole(value: float, epsilon: float = EPSILON) -> bool:
    """True if value is within epsilon of an integer."""
    return abs(value - round_half_up(value)) < epsilon


def in_window(value: float, low: float, high: float, epsilon: float = EPSILON) -> bool:
    """
    Half-open window test [low, high) with epsilon slack at both edges.

    A value within epsilon of ``low`` counts as inside; a value within
    epsilon of ``high`` counts as outside.
    """
    return low - epsilon <= value < high - epsilon
