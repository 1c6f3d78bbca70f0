"""Main CLI application.

Click commands for calcsum: mcp, sum, tools.
"""

from __future__ import annotations

import asyncio
import json
import math
import sys
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import click

from calcsum import __version__
from calcsum.arithmetic.engine import to_decimal
from calcsum.config.loader import load_config
from calcsum.core.errors import ConfigError

if TYPE_CHECKING:
    from calcsum.config.schema import CalcConfig


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> CalcConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _parse_number(raw: str) -> Any:
    """Parse a command-line value as a JSON number.

    Text that is not JSON is passed through unchanged so the validator
    reports it with its index.  A value with more significant digits
    than a float keeps is rejected rather than silently rounded.
    """
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if isinstance(value, float) and math.isfinite(value):
        if to_decimal(value) != Decimal(raw):
            raise click.BadParameter(
                f"{raw} has more digits than a double-precision number holds."
            )
    return value


def _parse_values(
    ctx: click.Context, param: click.Parameter, raw: tuple[str, ...]
) -> list[Any]:
    return [_parse_number(v) for v in raw]


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="calcsum")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """calcsum - Exact decimal summation as an MCP tool.

    Sums signed decimals without binary floating-point error and rounds
    half away from zero.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── mcp ──────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def mcp(ctx: click.Context) -> None:
    """Start the MCP server on stdio."""
    from calcsum.core.log import configure_logging
    from calcsum.mcp.server import run_server

    config = _load_config(ctx.obj["config_path"])
    configure_logging(config.logging)
    asyncio.run(run_server(config))


# ── sum ──────────────────────────────────────────────────────────


@cli.command(
    name="sum",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("values", nargs=-1, callback=_parse_values)
@click.option(
    "--places",
    type=float,
    default=None,
    help="Decimal places to round to (default from config, 2).",
)
@click.pass_context
def sum_command(
    ctx: click.Context, values: list[Any], places: float | None
) -> None:
    """Sum VALUES exactly and round half away from zero.

    Negative values may be given directly, e.g. ``calcsum sum 10 -3.5``.
    Each value must fit a double-precision number (about 17 significant
    digits); longer values are refused with exit status 2.
    """
    from calcsum.arithmetic import Invalid, calculate_sum, validate_sum_input

    config = _load_config(ctx.obj["config_path"])
    decimal_places = config.defaults.decimal_places if places is None else places

    outcome = validate_sum_input(
        {
            "values": values,
            "decimalPlaces": decimal_places,
        },
        max_decimal_places=config.limits.max_decimal_places,
    )
    if isinstance(outcome, Invalid):
        _error(outcome.message)
        return

    click.echo(calculate_sum(outcome.input.values, outcome.input.decimal_places))


# ── tools ────────────────────────────────────────────────────────


@cli.command()
def tools() -> None:
    """List the tools served over MCP."""
    from calcsum.cli.display import ToolDisplay
    from calcsum.mcp.server import _get_tools

    ToolDisplay().show_tools(_get_tools())
