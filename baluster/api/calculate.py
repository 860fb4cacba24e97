"""
Public calculator API.

calculate() is the call a form layer makes with the raw text of its two
input fields. It validates the span and thickness the way the calculator
page does, then hands off to the spacing solver. It returns a SpacingResult
regardless of what the user typed, so callers only need to display either
the layout or ``message``.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from baluster.spacing.rules import SpacingRules, get_rules
from baluster.spacing.solver import solve
from baluster.spacing.types import SpacingResult
from baluster.utilities.fractions import Measurement, ParseError, parse_fraction

logger = logging.getLogger(__name__)

SUPPORTED_INPUT_EXAMPLES: tuple[str, ...] = (
    "1.5",
    "1½",
    "1 1/2",
    "2¼",
    "3¾",
    "1-1/2",
    "2.125",
)

INVALID_SPAN_MESSAGE = "Please enter a valid positive number for total distance."
MISSING_THICKNESS_MESSAGE = "Please enter baluster thickness."
INVALID_THICKNESS_MESSAGE = (
    "Please enter a valid baluster thickness (e.g., 1.5, 1½, 1 1/2, 2¼)."
)


def short_span_message(rules: SpacingRules) -> str:
    return f"Total distance should be at least {rules.min_total_span:g} inches."


def calculate(
    total_span_text: Measurement,
    thickness_text: Measurement,
    rules: Optional[SpacingRules] = None,
) -> SpacingResult:
    """
    Validate raw field input and compute the baluster layout.

    Parameters
    ----------
    total_span_text:
        Distance between end supports, as typed ("36", "35 ½", "35.5").
    thickness_text:
        Baluster thickness, as typed ("1½", "1 1/2", "1.5").
    rules:
        Search constants; defaults to the packaged rules.

    Returns
    -------
    SpacingResult
        A failure carrying a user-facing message if either input is
        rejected, otherwise whatever solve() returns.
    """
    rules = rules or get_rules()

    try:
        total_span = parse_fraction(total_span_text)
    except ParseError:
        return SpacingResult.failed(INVALID_SPAN_MESSAGE)
    if not math.isfinite(total_span) or total_span <= 0:
        return SpacingResult.failed(INVALID_SPAN_MESSAGE)
    if total_span < rules.min_total_span:
        return SpacingResult.failed(short_span_message(rules))

    if thickness_text is None or (isinstance(thickness_text, str) and not thickness_text.strip()):
        return SpacingResult.failed(MISSING_THICKNESS_MESSAGE)

    try:
        thickness = parse_fraction(thickness_text)
    except ParseError:
        return SpacingResult.failed(INVALID_THICKNESS_MESSAGE)
    if not math.isfinite(thickness) or thickness <= 0:
        return SpacingResult.failed(INVALID_THICKNESS_MESSAGE)

    logger.info(f"Calculating layout for span={total_span} in, thickness={thickness} in")
    return solve(total_span, thickness_text, rules)
