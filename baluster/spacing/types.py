"""
Result types for the spacing solver.

All types are frozen dataclasses. A SpacingCandidate holds raw inches; a
SpacingResult is what callers (form layers, the CLI) consume, with the
measurements already rendered as construction fractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class MatchKind(str, Enum):
    """How well a candidate layout fits the sixteenth-inch grid."""

    EXACT = "Exact"  # equal gaps everywhere, each a whole number of sixteenths
    APPROXIMATE = "Approximate"  # rounded gaps; end gaps differ from inner gaps


@dataclass(frozen=True)
class SpacingCandidate:
    """
    One accepted post count and its layout, in decimal inches.

    Attributes:
        post_count: Number of balusters (N).
        spacing: Clear gap between adjacent post faces (S).
        edge_offset: Span edge to the centre of the first post (C1).
        pitch: Centre-to-centre distance between adjacent posts (Step).
        deviation: |spacing - target spacing|, the selection key.
        match_kind: EXACT or APPROXIMATE.
        approx_diff: |end gap - spacing| for approximate matches, else None.
    """

    post_count: int
    spacing: float
    edge_offset: float
    pitch: float
    deviation: float
    match_kind: MatchKind
    approx_diff: Optional[float] = None

    def __post_init__(self) -> None:
        if self.post_count < 1:
            raise ValueError(f"post_count must be >= 1, got {self.post_count}")
        if self.match_kind == MatchKind.APPROXIMATE and self.approx_diff is None:
            raise ValueError("approximate candidates must carry approx_diff")
        if self.match_kind == MatchKind.EXACT and self.approx_diff is not None:
            raise ValueError("exact candidates must not carry approx_diff")


@dataclass(frozen=True)
class SpacingResult:
    """Outcome of a solver or calculator call.

    Attributes:
        success: True when a layout was found.
        post_count: Number of balusters, or None on failure.
        edge_offset: Formatted C1 (e.g. "4 ¾"), or None on failure.
        pitch: Formatted centre-to-centre step, or None on failure.
        match_type: "Exact" or "Approximate (Diff: <fraction>)", or None on failure.
        spacing: Clear gap in decimal inches, or None on failure.
        message: Explanation for the user on failure, else None.
        candidate: The raw SpacingCandidate behind a success, else None.
    """

    success: bool
    post_count: Optional[int] = None
    edge_offset: Optional[str] = None
    pitch: Optional[str] = None
    match_type: Optional[str] = None
    spacing: Optional[float] = None
    message: Optional[str] = None
    candidate: Optional[SpacingCandidate] = None

    @classmethod
    def succeeded(
        cls,
        candidate: SpacingCandidate,
        edge_offset: str,
        pitch: str,
        match_type: str,
    ) -> SpacingResult:
        return cls(
            success=True,
            post_count=candidate.post_count,
            edge_offset=edge_offset,
            pitch=pitch,
            match_type=match_type,
            spacing=candidate.spacing,
            candidate=candidate,
        )

    @classmethod
    def failed(cls, message: str) -> SpacingResult:
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for JSON output; omits the raw candidate."""
        if not self.success:
            return {"success": False, "message": self.message}
        return {
            "success": True,
            "post_count": self.post_count,
            "edge_offset": self.edge_offset,
            "pitch": self.pitch,
            "match_type": self.match_type,
            "spacing": self.spacing,
        }
