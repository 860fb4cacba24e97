"""
Spacing rules: loads the solver's search constants from YAML at startup,
validates them, and exposes them as a frozen SpacingRules.

The default rules are a module-level singleton built eagerly at import time;
call get_rules() to obtain them. Nothing writes to them after startup, so
sharing them across threads is safe. load_rules() reads an alternative file
(e.g. in tests or from the command line) without touching the default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "rules.yaml"


class RulesError(ValueError):
    """Raised when a rules file is structurally invalid or inconsistent."""


@dataclass(frozen=True)
class SpacingRules:
    """
    Constants governing the post-count search.

    Attributes:
        target_spacing: Preferred clear gap; candidates closest to it win.
        min_spacing: Inclusive lower edge of the accepted spacing window.
        max_spacing: Exclusive upper edge of the accepted spacing window.
        max_edge_diff: Largest allowed |edge gap - spacing| for approximate matches.
        unit: Rounding denominator (16 = sixteenths of an inch).
        max_posts: Highest post count searched.
        epsilon: Slack applied to floating comparisons.
        min_total_span: Shortest span the calculator accepts.
    """

    target_spacing: float = 3.0
    min_spacing: float = 3.0
    max_spacing: float = 4.0
    max_edge_diff: float = 0.25
    unit: int = 16
    max_posts: int = 300
    epsilon: float = 1e-4
    min_total_span: float = 10.0

    def __post_init__(self) -> None:
        errors = _check_rules(self)
        if errors:
            raise RulesError(
                "Spacing rules validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )


def _check_rules(rules: SpacingRules) -> list[str]:
    errors: list[str] = []
    if rules.min_spacing <= 0:
        errors.append(f"spacing.min must be positive, got {rules.min_spacing}")
    if rules.min_spacing >= rules.max_spacing:
        errors.append(
            f"spacing.min ({rules.min_spacing}) must be less than spacing.max ({rules.max_spacing})"
        )
    if rules.max_edge_diff < 0:
        errors.append(f"spacing.max_edge_diff must be >= 0, got {rules.max_edge_diff}")
    if rules.unit < 1:
        errors.append(f"search.unit must be >= 1, got {rules.unit}")
    if rules.max_posts < 1:
        errors.append(f"search.max_posts must be >= 1, got {rules.max_posts}")
    if rules.epsilon <= 0:
        errors.append(f"search.epsilon must be positive, got {rules.epsilon}")
    if rules.min_total_span < 0:
        errors.append(f"input.min_total_span must be >= 0, got {rules.min_total_span}")
    return errors


# ── Loading ────────────────────────────────────────────────────────────────────

# (section, key, attribute, type)
_FIELDS: tuple[tuple[str, str, str, type], ...] = (
    ("spacing", "target", "target_spacing", float),
    ("spacing", "min", "min_spacing", float),
    ("spacing", "max", "max_spacing", float),
    ("spacing", "max_edge_diff", "max_edge_diff", float),
    ("search", "unit", "unit", int),
    ("search", "max_posts", "max_posts", int),
    ("search", "epsilon", "epsilon", float),
    ("input", "min_total_span", "min_total_span", float),
)


def load_rules(path: Path | str = DEFAULT_RULES_PATH) -> SpacingRules:
    """
    Read and validate a rules file.

    Raises:
        FileNotFoundError: If path does not exist.
        RulesError: If the YAML is malformed, a key is missing or mistyped,
            or the values are inconsistent. All problems are reported at once.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RulesError(f"Invalid YAML in rules file {path}: {e}") from e

    if not isinstance(data, dict):
        raise RulesError(f"Rules file {path} must contain a mapping")

    values: dict[str, float | int] = {}
    errors: list[str] = []
    for section, key, attr, kind in _FIELDS:
        block = data.get(section)
        if not isinstance(block, dict) or key not in block:
            errors.append(f"missing required key: {section}.{key}")
            continue
        raw = block[key]
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            errors.append(f"{section}.{key} must be a number, got {raw!r}")
            continue
        if kind is int and raw != int(raw):
            errors.append(f"{section}.{key} must be an integer, got {raw!r}")
            continue
        values[attr] = kind(raw)

    if errors:
        raise RulesError(
            f"Rules file {path} is invalid:\n" + "\n".join(f"  • {e}" for e in errors)
        )

    rules = SpacingRules(**values)
    logger.debug(f"Loaded spacing rules from {path}: {rules}")
    return rules


# ── Module-level singleton ─────────────────────────────────────────────────────

_rules: SpacingRules = load_rules()


def get_rules() -> SpacingRules:
    """Return the default rules loaded from the packaged rules.yaml."""
    return _rules
