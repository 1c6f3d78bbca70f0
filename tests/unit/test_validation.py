"""Tests for sum argument validation."""

from __future__ import annotations

import dataclasses

import pytest

from calcsum.arithmetic.validation import (
    DEFAULT_MAX_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES_CEILING,
    Invalid,
    SumInput,
    Valid,
    validate_sum_input,
)
from calcsum.core.errors import ElementTypeError, PrecisionError, ShapeError


def _invalid(args: object, **kwargs: object) -> Invalid:
    outcome = validate_sum_input(args, **kwargs)  # type: ignore[arg-type]
    assert isinstance(outcome, Invalid)
    return outcome


# ── Accepted input ───────────────────────────────────────────────


class TestValid:
    def test_basic(self):
        outcome = validate_sum_input({"values": [1.5, 2.5, 3.0], "decimalPlaces": 2})
        assert outcome == Valid(SumInput(values=(1.5, 2.5, 3.0), decimal_places=2))

    def test_empty_values(self):
        outcome = validate_sum_input({"values": [], "decimalPlaces": 0})
        assert isinstance(outcome, Valid)
        assert outcome.input.values == ()

    def test_whole_float_precision_becomes_int(self):
        outcome = validate_sum_input({"values": [1], "decimalPlaces": 2.0})
        assert isinstance(outcome, Valid)
        assert outcome.input.decimal_places == 2
        assert type(outcome.input.decimal_places) is int

    def test_tuple_values(self):
        outcome = validate_sum_input({"values": (1, 2), "decimalPlaces": 1})
        assert isinstance(outcome, Valid)

    def test_huge_integer_value(self):
        outcome = validate_sum_input({"values": [10**400], "decimalPlaces": 0})
        assert isinstance(outcome, Valid)

    def test_extra_keys_ignored(self):
        outcome = validate_sum_input(
            {"values": [1], "decimalPlaces": 1, "currency": "EUR"}
        )
        assert isinstance(outcome, Valid)

    def test_limit_is_inclusive(self):
        outcome = validate_sum_input(
            {"values": [1], "decimalPlaces": 10}, max_decimal_places=10
        )
        assert isinstance(outcome, Valid)


class TestSumInput:
    def test_frozen(self):
        sum_input = SumInput(values=(1,), decimal_places=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            sum_input.decimal_places = 3  # type: ignore[misc]

    def test_as_arguments(self):
        sum_input = SumInput(values=(1, -2.5), decimal_places=2)
        assert sum_input.as_arguments() == {"values": [1, -2.5], "decimalPlaces": 2}

    def test_revalidation_is_identity(self):
        sum_input = SumInput(values=(0.1, -3.0, 7), decimal_places=4)
        assert validate_sum_input(sum_input.as_arguments()) == Valid(sum_input)


# ── values shape ─────────────────────────────────────────────────


class TestShape:
    @pytest.mark.parametrize(
        "values",
        ["1,2,3", 5, 1.5, {"a": 1}, None, True],
    )
    def test_non_array_rejected(self, values: object):
        outcome = _invalid({"values": values, "decimalPlaces": 2})
        assert isinstance(outcome.error, ShapeError)
        assert outcome.message == "'values' must be an array of numbers."

    def test_missing_values(self):
        outcome = _invalid({"decimalPlaces": 2})
        assert isinstance(outcome.error, ShapeError)

    def test_none_arguments(self):
        outcome = _invalid(None)
        assert isinstance(outcome.error, ShapeError)

    def test_non_mapping_arguments(self):
        outcome = _invalid([1, 2, 3])
        assert isinstance(outcome.error, ShapeError)


# ── values elements ──────────────────────────────────────────────


class TestElements:
    def test_string_element(self):
        outcome = _invalid({"values": [1, "two", 3], "decimalPlaces": 2})
        assert isinstance(outcome.error, ElementTypeError)
        assert outcome.error.index == 1
        assert outcome.message == "'values[1]' must be a finite number. Received: two"

    def test_first_offender_reported(self):
        outcome = _invalid({"values": [1, 2, None, "x"], "decimalPlaces": 2})
        assert isinstance(outcome.error, ElementTypeError)
        assert outcome.error.index == 2
        assert "values[2]" in outcome.message
        assert outcome.message.endswith("Received: null")

    @pytest.mark.parametrize(
        ("value", "rendered"),
        [
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (True, "true"),
            ([2], "[2]"),
            ({"n": 1}, '{"n": 1}'),
        ],
    )
    def test_non_finite_or_non_number(self, value: object, rendered: str):
        outcome = _invalid({"values": [0.5, value], "decimalPlaces": 2})
        assert isinstance(outcome.error, ElementTypeError)
        assert outcome.message == (
            f"'values[1]' must be a finite number. Received: {rendered}"
        )


# ── decimalPlaces ────────────────────────────────────────────────


class TestDecimalPlaces:
    @pytest.mark.parametrize(
        "decimal_places",
        [-1, 2.5, "2", None, True, float("nan"), float("inf"), [2]],
    )
    def test_rejected(self, decimal_places: object):
        outcome = _invalid({"values": [1], "decimalPlaces": decimal_places})
        assert isinstance(outcome.error, PrecisionError)
        assert outcome.message == "'decimalPlaces' must be a non-negative integer."

    def test_missing(self):
        outcome = _invalid({"values": [1]})
        assert isinstance(outcome.error, PrecisionError)

    def test_over_limit(self):
        outcome = _invalid({"values": [1], "decimalPlaces": 11}, max_decimal_places=10)
        assert isinstance(outcome.error, PrecisionError)
        assert "decimalPlaces" in outcome.message
        assert "no greater than 10" in outcome.message

    def test_huge_value_bounded_without_explicit_limit(self):
        outcome = _invalid({"values": [1], "decimalPlaces": 1e300})
        assert isinstance(outcome.error, PrecisionError)
        assert outcome.error.limit == DEFAULT_MAX_DECIMAL_PLACES

    def test_default_limit_accepted(self):
        outcome = validate_sum_input(
            {"values": [1], "decimalPlaces": DEFAULT_MAX_DECIMAL_PLACES}
        )
        assert isinstance(outcome, Valid)

    def test_limit_capped_at_ceiling(self):
        outcome = _invalid(
            {"values": [1], "decimalPlaces": MAX_DECIMAL_PLACES_CEILING + 1},
            max_decimal_places=10**30,
        )
        assert isinstance(outcome.error, PrecisionError)
        assert outcome.error.limit == MAX_DECIMAL_PLACES_CEILING


# ── Ordering ─────────────────────────────────────────────────────


class TestOrdering:
    def test_shape_error_beats_precision_error(self):
        outcome = _invalid({"values": "nope", "decimalPlaces": -1})
        assert isinstance(outcome.error, ShapeError)

    def test_element_error_beats_precision_error(self):
        outcome = _invalid({"values": [1, "a"], "decimalPlaces": "x"})
        assert isinstance(outcome.error, ElementTypeError)

    def test_missing_everything_reports_values(self):
        outcome = _invalid({})
        assert isinstance(outcome.error, ShapeError)
