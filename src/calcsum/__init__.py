"""calcsum - exact decimal summation as an MCP tool."""

__version__ = "0.1.0"
