"""MCP server exposing the Confluence controllers as tools."""

from mcp_server.server import ConfluenceTools, McpTransport, build_server, serve

__all__ = [
    "ConfluenceTools",
    "McpTransport",
    "build_server",
    "serve",
]
