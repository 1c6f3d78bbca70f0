"""Validation of raw ``sum`` tool arguments.

:func:`validate_sum_input` inspects an untyped payload and returns a
tagged outcome: :class:`Valid` wrapping a :class:`SumInput`, or
:class:`Invalid` carrying the first problem found.  Checks run in a
fixed order; a bad ``values`` array is always reported before a bad
``decimalPlaces``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from calcsum.core.errors import (
    ElementTypeError,
    InputError,
    PrecisionError,
    ShapeError,
)


@dataclass(frozen=True, slots=True)
class SumInput:
    """Arguments that satisfy every precondition of ``calculate_sum``."""

    values: tuple[int | float, ...]
    decimal_places: int

    def as_arguments(self) -> dict[str, Any]:
        """Return the wire form of this input."""
        return {"values": list(self.values), "decimalPlaces": self.decimal_places}


@dataclass(frozen=True, slots=True)
class Valid:
    input: SumInput


@dataclass(frozen=True, slots=True)
class Invalid:
    error: InputError

    @property
    def message(self) -> str:
        return str(self.error)


ValidationOutcome: TypeAlias = Valid | Invalid

#: Bound on ``decimalPlaces`` when the caller configures none.
DEFAULT_MAX_DECIMAL_PLACES = 10_000
#: Largest bound a configuration may set; wider quanta would not fit a
#: decimal context.
MAX_DECIMAL_PLACES_CEILING = 1_000_000


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but a JSON boolean, not a number.
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _check_values(values: Any) -> tuple[int | float, ...] | InputError:
    if not isinstance(values, (list, tuple)):
        return ShapeError()
    for i, value in enumerate(values):
        if not _is_finite_number(value):
            return ElementTypeError(i, value)
    return tuple(values)


def _check_decimal_places(
    decimal_places: Any, max_decimal_places: int
) -> int | InputError:
    if not _is_finite_number(decimal_places):
        return PrecisionError()
    if isinstance(decimal_places, float) and not decimal_places.is_integer():
        return PrecisionError()
    if decimal_places < 0:
        return PrecisionError()
    if decimal_places > max_decimal_places:
        return PrecisionError(limit=max_decimal_places)
    return int(decimal_places)


def validate_sum_input(
    args: Mapping[str, Any] | None,
    max_decimal_places: int = DEFAULT_MAX_DECIMAL_PLACES,
) -> ValidationOutcome:
    """Check raw tool arguments and build a :class:`SumInput`.

    Args:
        args: The untyped ``arguments`` object of a tool call.  ``None``
            is treated as an empty mapping.
        max_decimal_places: Upper bound for ``decimalPlaces``, itself
            capped at ``MAX_DECIMAL_PLACES_CEILING``.

    Returns:
        ``Valid`` with the typed input, or ``Invalid`` with the first
        error: ``ShapeError``, then ``ElementTypeError`` for the lowest
        offending index, then ``PrecisionError``.
    """
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        return Invalid(ShapeError())

    values = _check_values(args.get("values"))
    if isinstance(values, InputError):
        return Invalid(values)

    decimal_places = _check_decimal_places(
        args.get("decimalPlaces"),
        min(max_decimal_places, MAX_DECIMAL_PLACES_CEILING),
    )
    if isinstance(decimal_places, InputError):
        return Invalid(decimal_places)

    return Valid(SumInput(values=values, decimal_places=decimal_places))
