"""Locate and read the calcsum TOML file.

Exactly one file is used, the first that applies of:

1. the ``path`` argument (``--config`` on the command line),
2. ``$CALCSUM_CONFIG``,
3. ``./calcsum.toml``,
4. ``$XDG_CONFIG_HOME/calcsum/config.toml`` (``~/.config`` by default).

Keys the file leaves out take the model defaults.  A path that was
named explicitly must exist; the two implicit locations are optional.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from calcsum.core.errors import ConfigError

from .schema import CalcConfig

ENV_VAR = "CALCSUM_CONFIG"


def _implicit_paths() -> tuple[Path, ...]:
    xdg = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return (Path.cwd() / "calcsum.toml", Path(xdg) / "calcsum" / "config.toml")


def find_config_file(path: str | Path | None = None) -> Path | None:
    """Return the file :func:`load_config` would read, if any."""
    for named, origin in ((path, "Config file"), (os.environ.get(ENV_VAR), ENV_VAR)):
        if named:
            candidate = Path(named)
            if not candidate.is_file():
                raise ConfigError(f"{origin} not found: {named}")
            return candidate
    return next((p for p in _implicit_paths() if p.is_file()), None)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


def load_config(path: str | Path | None = None) -> CalcConfig:
    """Read the selected TOML file into a :class:`CalcConfig`.

    Raises:
        ConfigError: The named file is missing or unreadable, is not
            TOML, or holds values the schema rejects.
    """
    source = find_config_file(path)
    if source is None:
        return CalcConfig()

    try:
        data: dict[str, Any] = tomllib.loads(source.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {source}: {e}") from e

    try:
        return CalcConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {_describe(e)}") from e
