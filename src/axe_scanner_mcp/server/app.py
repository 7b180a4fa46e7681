"""MCP server exposing the ``axe_scan_url`` tool over stdio."""

import logging
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from axe_scanner_mcp.scanner import AxeScanner, ScanRequest

from .handler import Scanner, handle_scan_request, render_payload

logger = logging.getLogger(__name__)

SERVER_NAME = "axe-scanner-mcp"
TOOL_NAME = "axe_scan_url"
TOOL_DESCRIPTION = "Run an axe accessibility scan against a URL"


def package_version() -> str:
    try:
        return pkg_version("axe-scanner-mcp")
    except PackageNotFoundError:
        return "0.0.0+unknown"


def tool_definition() -> types.Tool:
    return types.Tool(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        inputSchema=ScanRequest.model_json_schema(by_alias=True),
    )


def create_server(scanner: Scanner | None = None) -> Server:
    """Build the MCP server; ``scanner`` defaults to a configured ``AxeScanner``."""
    scan_backend = scanner or AxeScanner.from_config()
    server: Server = Server(SERVER_NAME, version=package_version())

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool_definition()]

    # Arguments are validated by the handler so that bad input yields a failure payload.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        if name != TOOL_NAME:
            raise ValueError(f"Unknown tool: {name}")
        payload = await handle_scan_request(arguments, scan_backend)
        return [types.TextContent(type="text", text=render_payload(payload))]

    return server


async def serve(scanner: Scanner | None = None) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    server = create_server(scanner)
    logger.info("Starting %s %s on stdio", SERVER_NAME, package_version())
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
