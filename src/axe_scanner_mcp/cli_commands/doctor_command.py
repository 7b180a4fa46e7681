"""``axe-scanner-mcp doctor``: pre-flight health check command."""

from __future__ import annotations

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import app, console

STATUS_ICONS = {
    "pass": "[green]✓[/green]",
    "fail": "[red]✗[/red]",
    "warn": "[yellow]![/yellow]",
}


@app.command()
def doctor() -> None:
    """Check that browsers and the axe-core bundle are available."""
    from .doctor_checks import (
        CheckResult,
        check_axe_script,
        check_browsers,
        check_python_version,
        find_browser_executables,
    )

    cli = cli_module()

    console.print("\n[bold]axe-scanner-mcp doctor[/bold]")
    console.print("─" * 36)
    console.print()

    results: list[CheckResult] = [check_python_version()]
    results.extend(check_browsers(cli.safe_async_run(find_browser_executables())))
    results.append(cli.safe_async_run(check_axe_script(cli.AxeScriptSource.from_config())))

    # Render
    for r in results:
        icon = STATUS_ICONS.get(r.status, "?")
        console.print(f"  {icon} {escape(r.message)}")
        if r.fix and r.status in ("fail", "warn"):
            for line in r.fix.splitlines():
                console.print(f"    {escape(line)}")

    # Summary
    counts = {"pass": 0, "fail": 0, "warn": 0}
    for r in results:
        counts[r.status] = counts.get(r.status, 0) + 1

    console.print()
    console.print(
        f"  Summary: {counts['pass']} passed, {counts['warn']} warnings, {counts['fail']} failed"
    )
    console.print()

    if counts["fail"] > 0:
        raise typer.Exit(1)
