"""Tests for the calculator API (form-field validation + solve)."""

import math

import pytest

from baluster.api.calculate import (
    INVALID_SPAN_MESSAGE,
    INVALID_THICKNESS_MESSAGE,
    MISSING_THICKNESS_MESSAGE,
    SUPPORTED_INPUT_EXAMPLES,
    calculate,
    short_span_message,
)
from baluster.spacing.rules import SpacingRules, get_rules
from baluster.spacing.solver import solve
from baluster.utilities.fractions import parse_fraction


class TestSpanValidation:
    def test_unparseable_span(self):
        result = calculate("abc", "1½")
        assert result.success is False
        assert result.message == INVALID_SPAN_MESSAGE

    def test_empty_span(self):
        assert calculate("", "1½").message == INVALID_SPAN_MESSAGE

    def test_zero_span(self):
        assert calculate("0", "1½").message == INVALID_SPAN_MESSAGE

    def test_negative_span(self):
        assert calculate("-36", "1½").message == INVALID_SPAN_MESSAGE

    def test_short_span(self):
        result = calculate("9 ½", "1")
        assert result.success is False
        assert result.message == "Total distance should be at least 10 inches."

    def test_minimum_span_accepted(self):
        """10 inches is allowed; 10 with 1 in posts has N=2 → S=8/3, so no layout."""
        result = calculate("10", "1")
        assert result.message != short_span_message(get_rules())

    def test_custom_minimum(self):
        rules = SpacingRules(min_total_span=40.0)
        result = calculate("36", "1½", rules)
        assert result.message == "Total distance should be at least 40 inches."


class TestThicknessValidation:
    def test_missing_thickness(self):
        assert calculate("36", "").message == MISSING_THICKNESS_MESSAGE

    def test_blank_thickness(self):
        assert calculate("36", "   ").message == MISSING_THICKNESS_MESSAGE

    def test_none_thickness(self):
        assert calculate("36", None).message == MISSING_THICKNESS_MESSAGE

    def test_unparseable_thickness(self):
        assert calculate("36", "thick").message == INVALID_THICKNESS_MESSAGE

    def test_zero_thickness(self):
        assert calculate("36", "0").message == INVALID_THICKNESS_MESSAGE

    def test_negative_thickness(self):
        assert calculate("36", "-1.5").message == INVALID_THICKNESS_MESSAGE


class TestCalculate:
    def test_fraction_span_and_thickness(self):
        """'12 ½' span with '1' posts is the two-post exact layout."""
        result = calculate("12 ½", "1")
        assert result.success
        assert result.post_count == 2
        assert result.edge_offset == "4"
        assert result.pitch == "4 ½"
        assert result.match_type == "Exact"

    def test_numeric_inputs(self):
        result = calculate(36, 1.5)
        assert result.success
        assert result.post_count == 7

    def test_delegates_to_solve(self):
        assert calculate("36", "1 1/2") == solve(36.0, "1 1/2")

    def test_no_layout_message_passes_through(self):
        result = calculate("10", "5")
        assert result.success is False
        assert result.message.startswith("No suitable configuration found")


class TestSupportedExamples:
    @pytest.mark.parametrize("text", SUPPORTED_INPUT_EXAMPLES)
    def test_every_example_parses_positive(self, text):
        assert parse_fraction(text) > 0

    @pytest.mark.parametrize("text", SUPPORTED_INPUT_EXAMPLES)
    def test_every_example_is_accepted(self, text):
        result = calculate("48", text)
        assert result.message not in (INVALID_THICKNESS_MESSAGE, MISSING_THICKNESS_MESSAGE)


class TestNonFiniteInputs:
    @pytest.mark.parametrize("span", [math.nan, math.inf, -math.inf])
    def test_non_finite_span(self, span):
        assert calculate(span, "1").message == INVALID_SPAN_MESSAGE

    @pytest.mark.parametrize("thickness", [math.nan, math.inf])
    def test_non_finite_thickness(self, thickness):
        assert calculate("36", thickness).message == INVALID_THICKNESS_MESSAGE

    def test_huge_span_text_is_a_failure(self):
        result = calculate("1e308", "1")
        assert result.success is False
        assert result.message.startswith("No suitable configuration found")

    def test_huge_thickness_text_is_a_failure(self):
        result = calculate("36", "1e308")
        assert result.success is False
        assert result.message.startswith("No suitable configuration found")
