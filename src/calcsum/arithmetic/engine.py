"""Exact decimal summation with round-half-away-from-zero.

Inputs are converted to :class:`~decimal.Decimal` through their
shortest round-trip text (``repr``), which is the decimal the caller
wrote: ``0.1`` becomes ``Decimal("0.1")`` rather than the binary
neighbour ``0.1000000000000000055511151231257827...``.  All arithmetic
then happens in a local decimal context sized so that no addition
rounds; the only rounding is the final ``quantize``.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal


def to_decimal(value: int | float) -> Decimal:
    """Convert a finite number to the decimal it was written as."""
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(value))


def _exact_context(terms: Sequence[Decimal], decimal_places: int) -> Context:
    """Build a context wide enough for every term and the final quantum."""
    # Carries from n additions add at most len(str(n)) leading digits.
    highest = max([0, *(t.adjusted() for t in terms)]) + len(str(len(terms))) + 1
    lowest = min([0, -decimal_places, *(int(t.as_tuple().exponent) for t in terms)])
    return Context(
        prec=highest - lowest + 1,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def exact_sum(values: Sequence[int | float], decimal_places: int = 0) -> Decimal:
    """Left fold of *values* into an exact decimal total."""
    terms = [to_decimal(v) for v in values]
    context = _exact_context(terms, decimal_places)
    total = Decimal(0)
    for term in terms:
        total = context.add(total, term)
    return total


def round_half_away(value: Decimal, decimal_places: int) -> Decimal:
    """Round *value* to *decimal_places* digits, ties away from zero.

    A result that rounds to zero is returned unsigned.
    """
    context = _exact_context([value], decimal_places)
    quantum = Decimal(1).scaleb(-decimal_places, context)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


def calculate_sum(values: Sequence[int | float], decimal_places: int) -> str:
    """Sum *values* exactly and render with exactly *decimal_places* digits.

    Expects validated input: every value finite, ``decimal_places >= 0``.

    >>> calculate_sum([1.5, 2.5, 3.0], 2)
    '7.00'
    >>> calculate_sum([-2.125], 2)
    '-2.13'
    >>> calculate_sum([1.7, 2.3], 0)
    '4'
    """
    total = exact_sum(values, decimal_places)
    return format(round_half_away(total, decimal_places), "f")
