"""Pydantic models for calcsum configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from calcsum.arithmetic.validation import (
    DEFAULT_MAX_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES_CEILING,
)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    structured: bool = False


class LimitsConfig(BaseModel):
    """Bounds applied while validating tool arguments."""

    max_decimal_places: int = Field(
        default=DEFAULT_MAX_DECIMAL_PLACES, ge=0, le=MAX_DECIMAL_PLACES_CEILING
    )


class DefaultsConfig(BaseModel):
    """Defaults for the local ``sum`` command."""

    decimal_places: int = Field(default=2, ge=0)


class CalcConfig(BaseModel):
    """Top-level configuration for calcsum."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
