"""``axe-scan <url>`` client command."""

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import err_console, scan_app


@scan_app.command()
def scan(url: str = typer.Argument(..., help="URL to scan")) -> None:
    """Start the server, run axe_scan_url for URL and print the result."""
    cli = cli_module()
    try:
        output = cli.safe_async_run(cli.call_scan(url))
    except Exception as exc:
        err_console.print(f"[red]Scan failed:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(1) from exc
    typer.echo(output)
