"""Exact decimal summation and argument validation."""

from calcsum.arithmetic.engine import calculate_sum, exact_sum, round_half_away
from calcsum.arithmetic.validation import (
    DEFAULT_MAX_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES_CEILING,
    Invalid,
    SumInput,
    Valid,
    ValidationOutcome,
    validate_sum_input,
)

__all__ = [
    "DEFAULT_MAX_DECIMAL_PLACES",
    "MAX_DECIMAL_PLACES_CEILING",
    "Invalid",
    "SumInput",
    "Valid",
    "ValidationOutcome",
    "calculate_sum",
    "exact_sum",
    "round_half_away",
    "validate_sum_input",
]
