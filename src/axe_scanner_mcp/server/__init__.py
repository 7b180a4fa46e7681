"""MCP tool server for accessibility scans."""

from .app import SERVER_NAME, TOOL_NAME, create_server, package_version, serve, tool_definition
from .handler import (
    MISSING_BROWSER_HINT,
    failure_payload,
    handle_scan_request,
    render_payload,
    success_payload,
)

__all__ = [
    "MISSING_BROWSER_HINT",
    "SERVER_NAME",
    "TOOL_NAME",
    "create_server",
    "failure_payload",
    "handle_scan_request",
    "package_version",
    "render_payload",
    "serve",
    "success_payload",
    "tool_definition",
]
