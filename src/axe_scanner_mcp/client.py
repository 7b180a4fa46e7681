"""Command-line client: start the server as a subprocess and call ``axe_scan_url`` once."""

import os
import sys
from collections.abc import Sequence
from pathlib import Path

import mcp.types as types
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from axe_scanner_mcp.config import get_server_command
from axe_scanner_mcp.server.app import TOOL_NAME


def default_server_command() -> list[str]:
    """Run the server with the interpreter and package of the running client."""
    return [sys.executable, "-m", "axe_scanner_mcp", "serve"]


def server_parameters(work_dir: Path | None = None) -> StdioServerParameters:
    command = get_server_command(work_dir) or default_server_command()
    return StdioServerParameters(
        command=command[0],
        args=command[1:],
        env=dict(os.environ),
    )


def render_content(content: Sequence[types.ContentBlock]) -> str:
    """Join text blocks with newlines; other block types are emitted as JSON."""
    parts = []
    for item in content:
        if isinstance(item, types.TextContent):
            parts.append(item.text)
        else:
            parts.append(item.model_dump_json(exclude_none=True))
    return "\n".join(parts)


async def call_scan(url: str, params: StdioServerParameters | None = None) -> str:
    """Connect, call the scan tool with only ``url`` set and return its text output."""
    params = params or server_parameters()
    async with stdio_client(params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()
            result = await session.call_tool(TOOL_NAME, arguments={"url": url})
    return render_content(result.content)
