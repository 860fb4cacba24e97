"""
Baluster spacing calculator.

Lays out vertical railing posts evenly across a span: parses carpenter
fraction text, searches post counts for a clear gap in [3, 4) inches as
close to 3 as possible, and renders the layout back in sixteenths.
"""

from baluster.api.calculate import calculate
from baluster.spacing.solver import NoSolutionFound, solve
from baluster.spacing.types import MatchKind, SpacingCandidate, SpacingResult
from baluster.utilities.fractions import ParseError, format_fraction, parse_fraction

__all__ = [
    "calculate",
    "solve",
    "parse_fraction",
    "format_fraction",
    "ParseError",
    "NoSolutionFound",
    "MatchKind",
    "SpacingCandidate",
    "SpacingResult",
]
