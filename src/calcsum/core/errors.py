"""Exception hierarchy for calcsum.

Every module imports from here. The hierarchy is:

    CalcError
    ├── InputError
    │   ├── ShapeError
    │   ├── ElementTypeError(index, value)
    │   └── PrecisionError
    ├── UnknownToolError(name)
    └── ConfigError

``InputError`` instances are carried as values inside a validation
outcome rather than raised; malformed tool arguments are an expected
condition, not a fault.
"""

from __future__ import annotations

import json
from typing import Any


class CalcError(Exception):
    """Base exception for all calcsum errors."""


# ─── Input Errors ─────────────────────────────────────────────


class InputError(CalcError):
    """Tool arguments do not have the required shape."""


class ShapeError(InputError):
    """``values`` is not an array."""

    def __init__(self) -> None:
        super().__init__("'values' must be an array of numbers.")


def _describe(value: Any) -> str:
    """Render an offending value the way it appeared in the JSON payload."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


class ElementTypeError(InputError):
    """An element of ``values`` is not a finite number."""

    def __init__(self, index: int, value: Any) -> None:
        self.index = index
        self.value = value
        super().__init__(
            f"'values[{index}]' must be a finite number. Received: {_describe(value)}"
        )


class PrecisionError(InputError):
    """``decimalPlaces`` is missing, not whole, negative or over the limit."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit
        msg = "'decimalPlaces' must be a non-negative integer."
        if limit is not None:
            msg = (
                "'decimalPlaces' must be a non-negative integer "
                f"no greater than {limit}."
            )
        super().__init__(msg)


# ─── Dispatch Errors ──────────────────────────────────────────


class UnknownToolError(CalcError):
    """Requested tool is not served."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool '{name}'.")


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(CalcError):
    """Invalid configuration."""
