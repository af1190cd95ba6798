from __future__ import annotations

"""MCP server entrypoint objects.

Exposes two protocol operations:
    tools/list -> ToolRegistry.list_tools()
    tools/call -> WeatherGateway.invoke(name, arguments)

Every failure inside a tool call leaves this module as `InternalError`.
"""

import logging
import sys
from typing import Any

from anyio import to_thread
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from core.errors import InternalError
from tools import ToolRegistry, WeatherGateway

SERVER_NAME = "weatherapi-server"
SERVER_VERSION = "0.1.0"
STARTUP_MESSAGE = "WeatherAPI MCP server running on stdio"

logger = logging.getLogger("weather.server")


async def call_tool(gateway: WeatherGateway, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Run one tool call and wrap any failure once.

    The gateway blocks on HTTP, so it runs in a worker thread to keep the
    event loop free for other requests.
    """
    logger.info("Tool call received: name=%s", name)
    try:
        report = await to_thread.run_sync(gateway.invoke, name, arguments)
    except Exception as exc:
        logger.exception("Tool call failed: %s", name)
        raise InternalError(name, str(exc)) from exc

    logger.info("Tool call completed: name=%s chars=%s", name, len(report))
    return [types.TextContent(type="text", text=report)]


def create_server(registry: ToolRegistry, gateway: WeatherGateway) -> Server:
    """Create the low-level MCP server with tool handlers registered."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return registry.list_tools()

    # Schema bounds are documentation only; values such as days=20 must
    # reach WeatherAPI unchanged.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return await call_tool(gateway, name, arguments)

    return server


async def serve_stdio(server: Server) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        print(STARTUP_MESSAGE, file=sys.stderr)
        await server.run(read_stream, write_stream, server.create_initialization_options())
