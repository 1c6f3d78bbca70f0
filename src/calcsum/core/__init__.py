"""Core errors and logging setup."""

from calcsum.core.errors import (
    CalcError,
    ConfigError,
    ElementTypeError,
    InputError,
    PrecisionError,
    ShapeError,
    UnknownToolError,
)
from calcsum.core.log import configure_logging

__all__ = [
    "CalcError",
    "ConfigError",
    "ElementTypeError",
    "InputError",
    "PrecisionError",
    "ShapeError",
    "UnknownToolError",
    "configure_logging",
]
