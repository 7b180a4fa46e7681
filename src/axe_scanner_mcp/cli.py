"""axe-scanner-mcp CLI - accessibility scans served over MCP."""

from axe_scanner_mcp.cli_commands.shared import app, console, err_console, scan_app
from axe_scanner_mcp.client import call_scan
from axe_scanner_mcp.config import get_log_level
from axe_scanner_mcp.scanner import AxeScriptSource
from axe_scanner_mcp.server import package_version
from axe_scanner_mcp.server import serve as serve_stdio
from axe_scanner_mcp.utils.async_utils import safe_async_run
from axe_scanner_mcp.utils.log_setup import configure_logging

# Command modules register themselves on the shared apps.
from axe_scanner_mcp.cli_commands import doctor_command, scan_command, serve_command  # noqa: F401

__all__ = [
    "AxeScriptSource",
    "app",
    "call_scan",
    "configure_logging",
    "console",
    "err_console",
    "get_log_level",
    "main",
    "package_version",
    "safe_async_run",
    "scan_app",
    "scan_main",
    "serve_stdio",
]


def main():
    """Entry point for the server CLI."""
    app()


def scan_main():
    """Entry point for the ``axe-scan`` client."""
    scan_app()
