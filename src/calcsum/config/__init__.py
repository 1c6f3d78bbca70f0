"""Configuration loading and validation."""

from calcsum.config.loader import find_config_file, load_config
from calcsum.config.schema import (
    CalcConfig,
    DefaultsConfig,
    LimitsConfig,
    LoggingConfig,
)

__all__ = [
    "CalcConfig",
    "DefaultsConfig",
    "LimitsConfig",
    "LoggingConfig",
    "find_config_file",
    "load_config",
]
