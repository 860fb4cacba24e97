"""
Baluster spacing solver: choose a post count for a span.

Searches post counts N = 1..max_posts in two passes:

  1. Exact: every gap (both end gaps and all inner gaps) is the same whole
     number of sixteenths.
         S_units = (span·u − N·t·u) / (N + 1)
  2. Approximate, only if pass 1 found nothing: inner gaps are rounded to
     the nearest sixteenth and the leftover is split between the two end
     gaps, which may differ from the inner gap by at most max_edge_diff.
         S = round_u((span − N·t) / (N + 1))
         A = round_u((span − N·t − (N − 1)·S) / 2)

In both passes the accepted spacing must lie in [min_spacing, max_spacing)
and the candidate closest to target_spacing wins. Only a strictly smaller
deviation replaces the current best, so ties keep the smallest N.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from baluster.spacing.rules import SpacingRules, get_rules
from baluster.spacing.types import MatchKind, SpacingCandidate, SpacingResult
from baluster.utilities.fractions import Measurement, ParseError, format_fraction, parse_fraction
from baluster.utilities.tolerance import (
    SIXTEENTHS,
    in_window,
    is_whole,
    round_half_up,
    round_to_unit,
)

logger = logging.getLogger(__name__)


class NoSolutionFound(Exception):
    """Raised when no post count in 1..max_posts yields an acceptable layout."""

    def __init__(self, total_span: float, thickness: float, rules: SpacingRules) -> None:
        super().__init__(
            f"no post count in 1..{rules.max_posts} gives spacing in "
            f"[{rules.min_spacing:g}, {rules.max_spacing:g}) for span {total_span:g} "
            f"and thickness {thickness:g}"
        )
        self.total_span = total_span
        self.thickness = thickness


def no_solution_message(rules: SpacingRules) -> str:
    """User-facing explanation for an exhausted search."""
    return (
        f"No suitable configuration found with spacing between "
        f"{rules.min_spacing:g}-{rules.max_spacing:g} inches. Try adjusting parameters."
    )


# ── Search passes ──────────────────────────────────────────────────────────────


def find_exact_candidate(
    total_span: float,
    thickness: float,
    rules: SpacingRules,
) -> Optional[SpacingCandidate]:
    """
    Best layout whose gaps are all the same whole number of sixteenths.

    Returns:
        The candidate closest to the target spacing, or None.
    """
    u = rules.unit
    best: Optional[SpacingCandidate] = None

    for n in range(1, rules.max_posts + 1):
        s_units = (total_span * u - n * thickness * u) / (n + 1)
        # Huge spans or thicknesses overflow to inf; such counts cannot fit.
        if not math.isfinite(s_units) or s_units <= 0 or not is_whole(s_units, rules.epsilon):
            continue

        # Snap to the grid so the reported spacing is exactly k/u inches.
        spacing = round_half_up(s_units) / u
        if not in_window(spacing, rules.min_spacing, rules.max_spacing, rules.epsilon):
            continue

        deviation = abs(spacing - rules.target_spacing)
        if best is None or deviation < best.deviation:
            best = SpacingCandidate(
                post_count=n,
                spacing=spacing,
                edge_offset=spacing + thickness / 2,
                pitch=spacing + thickness,
                deviation=deviation,
                match_kind=MatchKind.EXACT,
            )

    return best


def find_approximate_candidate(
    total_span: float,
    thickness: float,
    rules: SpacingRules,
) -> Optional[SpacingCandidate]:
    """
    Best layout with rounded inner gaps and compensating end gaps.

    Returns:
        The candidate closest to the target spacing, or None.
    """
    u = rules.unit
    best: Optional[SpacingCandidate] = None

    for n in range(1, rules.max_posts + 1):
        raw_spacing = (total_span - n * thickness) / (n + 1)
        if not math.isfinite(raw_spacing * u):
            continue
        spacing = round_to_unit(raw_spacing, u)

        raw_end_gap = (total_span - n * thickness - (n - 1) * spacing) / 2
        if not math.isfinite(raw_end_gap * u):
            continue
        end_gap = round_to_unit(raw_end_gap, u)
        diff = abs(end_gap - spacing)

        if end_gap <= 0 or spacing <= 0:
            continue
        if diff > rules.max_edge_diff + rules.epsilon:
            continue
        if not in_window(spacing, rules.min_spacing, rules.max_spacing, rules.epsilon):
            continue

        deviation = abs(spacing - rules.target_spacing)
        if best is None or deviation < best.deviation:
            best = SpacingCandidate(
                post_count=n,
                spacing=spacing,
                edge_offset=end_gap + thickness / 2,
                pitch=spacing + thickness,
                deviation=deviation,
                match_kind=MatchKind.APPROXIMATE,
                approx_diff=diff,
            )

    return best


def find_best_candidate(
    total_span: float,
    thickness: float,
    rules: Optional[SpacingRules] = None,
) -> SpacingCandidate:
    """
    Run the exact pass, then the approximate pass if the first is empty.

    Raises:
        NoSolutionFound: If neither pass accepts any post count.
    """
    rules = rules or get_rules()

    exact = find_exact_candidate(total_span, thickness, rules)
    if exact is not None:
        logger.debug(f"Exact match: N={exact.post_count}, S={exact.spacing}")
        return exact

    logger.debug(f"No exact match for span={total_span}, thickness={thickness}; trying approximate")
    approx = find_approximate_candidate(total_span, thickness, rules)
    if approx is not None:
        logger.debug(
            f"Approximate match: N={approx.post_count}, S={approx.spacing}, diff={approx.approx_diff}"
        )
        return approx

    raise NoSolutionFound(total_span, thickness, rules)


# ── Public entry point ─────────────────────────────────────────────────────────


def match_label(candidate: SpacingCandidate, unit: int = SIXTEENTHS) -> str:
    """'Exact', or 'Approximate (Diff: <fraction>)' for approximate matches."""
    if candidate.match_kind == MatchKind.EXACT:
        return MatchKind.EXACT.value
    return f"{MatchKind.APPROXIMATE.value} (Diff: {format_fraction(candidate.approx_diff, unit)})"


def solve(
    total_span: float,
    thickness_text: Measurement,
    rules: Optional[SpacingRules] = None,
) -> SpacingResult:
    """
    Find the baluster layout for a span.

    Parameters
    ----------
    total_span:
        Distance between the end supports, in inches. Validated by the caller.
    thickness_text:
        Post thickness as fraction text ("1½", "1 1/2", "1.5") or a number.
    rules:
        Search constants; defaults to the packaged rules.

    Returns
    -------
    SpacingResult
        Always returned, never raises for bad thickness text or an exhausted
        search. Inspect ``success`` and ``message``.
    """
    rules = rules or get_rules()

    try:
        thickness = parse_fraction(thickness_text)
    except ParseError as exc:
        logger.debug(f"Thickness rejected: {exc}")
        return SpacingResult.failed(f"Calculation error: {exc}")

    if not (math.isfinite(total_span) and math.isfinite(thickness)):
        logger.debug(f"Non-finite input: span={total_span}, thickness={thickness}")
        return SpacingResult.failed(no_solution_message(rules))

    try:
        candidate = find_best_candidate(total_span, thickness, rules)
    except NoSolutionFound as exc:
        logger.debug(f"Search exhausted: {exc}")
        return SpacingResult.failed(no_solution_message(rules))

    return SpacingResult.succeeded(
        candidate,
        edge_offset=format_fraction(candidate.edge_offset, rules.unit),
        pitch=format_fraction(candidate.pitch, rules.unit),
        match_type=match_label(candidate, rules.unit),
    )
