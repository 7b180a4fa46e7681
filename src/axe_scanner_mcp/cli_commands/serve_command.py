"""``axe-scanner-mcp serve`` and ``version`` commands."""

import typer

from .deps import cli_module
from .shared import app, console


@app.command()
def serve(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level for stderr output (default: AXE_SCANNER_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """Serve the axe_scan_url tool over stdio."""
    cli = cli_module()
    cli.configure_logging((log_level or cli.get_log_level()).upper())
    cli.safe_async_run(cli.serve_stdio())


@app.command()
def version() -> None:
    """Show the installed axe-scanner-mcp version."""
    cli = cli_module()
    console.print(f"axe-scanner-mcp {cli.package_version()}")
