"""Rich display for tool discovery.

Renders the server's tool listing the way an MCP client sees it.
Accepts an optional :class:`~rich.console.Console` for dependency
injection in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mcp.types import Tool


class ToolDisplay:
    """Table rendering of MCP tool definitions."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show_tools(self, tools: Sequence[Tool]) -> None:
        """Print one row per tool with its arguments."""
        table = Table(title="Tools", show_lines=True)
        table.add_column("Name", style="bold cyan", no_wrap=True)
        table.add_column("Description")
        table.add_column("Arguments", style="green")

        for tool in tools:
            properties = tool.inputSchema.get("properties", {})
            required = set(tool.inputSchema.get("required", []))
            args = [
                f"{name}: {spec.get('type', 'any')}"
                + (" (required)" if name in required else "")
                for name, spec in properties.items()
            ]
            table.add_row(tool.name, tool.description or "", "\n".join(args))

        self._console.print(table)
