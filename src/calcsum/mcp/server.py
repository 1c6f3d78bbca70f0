"""MCP server exposing the ``sum`` tool."""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from calcsum import __version__
from calcsum.arithmetic import (
    DEFAULT_MAX_DECIMAL_PLACES,
    Invalid,
    calculate_sum,
    validate_sum_input,
)
from calcsum.config.schema import CalcConfig
from calcsum.core.errors import UnknownToolError

logger = logging.getLogger(__name__)

SERVER_NAME = "calculator-mcp"
SUM_TOOL = "sum"


def _get_tools() -> list[Tool]:
    """Define the MCP tools."""
    return [
        Tool(
            name=SUM_TOOL,
            description=(
                "Sum an array of signed decimal numbers and round the result "
                "to a specified number of decimal places. Uses precise decimal "
                "arithmetic suitable for accounting and tax calculations. "
                "Rounding uses the 'round half away from zero' strategy "
                "(equivalent to Excel ROUND)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "values": {
                        "type": "array",
                        "items": {"type": "number"},
                        "description": (
                            "Array of signed decimal numbers to sum "
                            "(e.g. [1.00, -2.50, 3.89])"
                        ),
                    },
                    "decimalPlaces": {
                        "type": "number",
                        "description": (
                            "Number of decimal places to round the result to "
                            "(e.g. 2 for 2 decimal places)"
                        ),
                    },
                },
                "required": ["values", "decimalPlaces"],
            },
        ),
    ]


def _text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def _error_result(message: str) -> CallToolResult:
    return _text_result(f"Error: {message}", is_error=True)


async def call_tool(
    name: str,
    arguments: dict[str, Any] | None,
    max_decimal_places: int = DEFAULT_MAX_DECIMAL_PLACES,
) -> CallToolResult:
    """Handle tool calls."""
    if name == SUM_TOOL:
        return await _handle_sum(arguments, max_decimal_places)
    logger.info("Rejected call to unknown tool %r", name)
    return _error_result(str(UnknownToolError(name)))


async def _handle_sum(
    args: dict[str, Any] | None, max_decimal_places: int
) -> CallToolResult:
    """Validate arguments, then sum and round."""
    outcome = validate_sum_input(args, max_decimal_places=max_decimal_places)
    if isinstance(outcome, Invalid):
        logger.info("Rejected sum arguments: %s", outcome.message)
        return _error_result(outcome.message)

    sum_input = outcome.input
    logger.debug(
        "sum of %d values at %d places",
        len(sum_input.values),
        sum_input.decimal_places,
    )
    return _text_result(calculate_sum(sum_input.values, sum_input.decimal_places))


def create_server(config: CalcConfig | None = None) -> Server:
    """Build a server with the tool handlers registered."""
    limits = (config or CalcConfig()).limits
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return _get_tools()

    # Arguments are checked by validate_sum_input, whose messages and
    # ordering are part of the tool's contract.
    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def handle_call(name: str, arguments: dict) -> CallToolResult:  # type: ignore[type-arg]
        try:
            return await call_tool(name, arguments, limits.max_decimal_places)
        except Exception:
            logger.exception("Error during tool call %r", name)
            raise

    return server


async def run_server(config: CalcConfig | None = None) -> None:
    """Start the MCP server on stdio."""
    server = create_server(config)
    logger.info("Starting %s %s on stdio", SERVER_NAME, __version__)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
