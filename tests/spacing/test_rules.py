"""
Tests for spacing rules loading.

Covers:
  - The packaged rules.yaml loads and matches the documented constants
  - SpacingRules validates its values at construction
  - Missing keys, wrong types and bad YAML raise at load time
"""

import shutil
from dataclasses import FrozenInstanceError

import pytest

from baluster.spacing.rules import (
    DEFAULT_RULES_PATH,
    RulesError,
    SpacingRules,
    get_rules,
    load_rules,
)


@pytest.fixture(scope="module")
def rules():
    return get_rules()


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.yaml"
    shutil.copyfile(DEFAULT_RULES_PATH, path)
    return path


# ── Packaged rules ─────────────────────────────────────────────────────────────


class TestPackagedRules:
    def test_spacing_window(self, rules):
        assert rules.target_spacing == 3.0
        assert rules.min_spacing == 3.0
        assert rules.max_spacing == 4.0
        assert rules.max_edge_diff == 0.25

    def test_search_constants(self, rules):
        assert rules.unit == 16
        assert rules.max_posts == 300
        assert rules.epsilon == 1e-4

    def test_min_total_span(self, rules):
        assert rules.min_total_span == 10.0

    def test_integer_fields_are_int(self, rules):
        assert isinstance(rules.unit, int)
        assert isinstance(rules.max_posts, int)

    def test_matches_dataclass_defaults(self, rules):
        assert rules == SpacingRules()

    def test_singleton(self):
        assert get_rules() is get_rules()

    def test_is_frozen(self, rules):
        with pytest.raises(FrozenInstanceError):
            rules.max_posts = 10  # type: ignore[misc]


# ── Construction-time validation ───────────────────────────────────────────────


class TestSpacingRulesValidation:
    def test_inverted_window(self):
        with pytest.raises(RulesError, match="must be less than spacing.max"):
            SpacingRules(min_spacing=4.0, max_spacing=3.0)

    def test_zero_unit(self):
        with pytest.raises(RulesError, match="search.unit must be >= 1"):
            SpacingRules(unit=0)

    def test_zero_max_posts(self):
        with pytest.raises(RulesError, match="search.max_posts must be >= 1"):
            SpacingRules(max_posts=0)

    def test_non_positive_epsilon(self):
        with pytest.raises(RulesError, match="search.epsilon must be positive"):
            SpacingRules(epsilon=0.0)

    def test_negative_edge_diff(self):
        with pytest.raises(RulesError, match="max_edge_diff must be >= 0"):
            SpacingRules(max_edge_diff=-0.1)

    def test_reports_all_problems(self):
        with pytest.raises(RulesError) as exc_info:
            SpacingRules(unit=0, max_posts=0)
        message = str(exc_info.value)
        assert "search.unit" in message
        assert "search.max_posts" in message

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            SpacingRules(unit=0)


# ── Loading from files ─────────────────────────────────────────────────────────


class TestLoadRules:
    def test_copy_loads_identically(self, rules_file, rules):
        assert load_rules(rules_file) == rules

    def test_accepts_string_path(self, rules_file, rules):
        assert load_rules(str(rules_file)) == rules

    def test_override_value(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("max_posts: 300", "max_posts: 50"))
        assert load_rules(rules_file).max_posts == 50

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_missing_key_raises(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("  unit: 16", ""))
        with pytest.raises(RulesError, match="missing required key: search.unit"):
            load_rules(rules_file)

    def test_missing_section_raises(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("spacing:\n  target: 3.0\n  min: 3.0\n  max: 4.0\n  max_edge_diff: 0.25\n")
        with pytest.raises(RulesError) as exc_info:
            load_rules(path)
        assert "search.max_posts" in str(exc_info.value)
        assert "input.min_total_span" in str(exc_info.value)

    def test_non_numeric_value_raises(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("target: 3.0", "target: three"))
        with pytest.raises(RulesError, match="spacing.target must be a number"):
            load_rules(rules_file)

    def test_boolean_value_raises(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("max_posts: 300", "max_posts: true"))
        with pytest.raises(RulesError, match="search.max_posts must be a number"):
            load_rules(rules_file)

    def test_fractional_integer_field_raises(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("unit: 16", "unit: 16.5"))
        with pytest.raises(RulesError, match="search.unit must be an integer"):
            load_rules(rules_file)

    def test_inconsistent_values_raise(self, rules_file):
        rules_file.write_text(rules_file.read_text().replace("max: 4.0", "max: 2.0"))
        with pytest.raises(RulesError, match="must be less than spacing.max"):
            load_rules(rules_file)

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("")
        with pytest.raises(RulesError, match="must contain a mapping"):
            load_rules(path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("spacing: [unclosed\n")
        with pytest.raises(RulesError, match="Invalid YAML"):
            load_rules(path)
