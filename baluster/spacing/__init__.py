from .types import MatchKind, SpacingCandidate, SpacingResult
from .rules import DEFAULT_RULES_PATH, RulesError, SpacingRules, get_rules, load_rules
from .solver import (
    NoSolutionFound,
    find_approximate_candidate,
    find_best_candidate,
    find_exact_candidate,
    match_label,
    no_solution_message,
    solve,
)

__all__ = [
    "MatchKind",
    "SpacingCandidate",
    "SpacingResult",
    "SpacingRules",
    "RulesError",
    "DEFAULT_RULES_PATH",
    "get_rules",
    "load_rules",
    "NoSolutionFound",
    "find_exact_candidate",
    "find_approximate_candidate",
    "find_best_candidate",
    "match_label",
    "no_solution_message",
    "solve",
]
