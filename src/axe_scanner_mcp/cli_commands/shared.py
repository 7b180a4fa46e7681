"""Shared CLI app objects."""

import typer
from rich.console import Console

app = typer.Typer(
    name="axe-scanner-mcp",
    help="MCP server exposing axe-core accessibility scans",
    no_args_is_help=True,
)
scan_app = typer.Typer(
    name="axe-scan",
    help="Scan one URL for accessibility issues through the MCP server",
)
console = Console()
err_console = Console(stderr=True)
