"""Individual health-check functions for ``axe-scanner-mcp doctor``."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from playwright.async_api import async_playwright

from axe_scanner_mcp.scanner import AxeScriptSource, ScanError
from axe_scanner_mcp.scanner.browser import BROWSER_NAMES

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class CheckResult:
    """Outcome of a single diagnostic check."""

    name: str
    status: str  # "pass", "fail", "warn"
    message: str
    fix: str = ""


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_python_version() -> CheckResult:
    """Verify Python >= 3.12."""
    v = sys.version_info
    ver = f"{v.major}.{v.minor}.{v.micro}"
    if (v.major, v.minor) >= (3, 12):
        return CheckResult("Python version", "pass", f"Python {ver}")
    return CheckResult(
        "Python version", "fail", f"Python {ver} (requires >= 3.12)", fix="Install Python 3.12+"
    )


async def find_browser_executables() -> dict[str, str]:
    """Map each engine name to the executable path Playwright expects."""
    async with async_playwright() as playwright:
        return {name: getattr(playwright, name).executable_path for name in BROWSER_NAMES}


def check_browsers(executables: dict[str, str]) -> list[CheckResult]:
    """The default engine is required; the others only warn."""
    results: list[CheckResult] = []
    for name in BROWSER_NAMES:
        path = executables.get(name, "")
        if path and Path(path).exists():
            results.append(CheckResult(f"Browser {name}", "pass", f"{name}: {path}"))
            continue
        results.append(
            CheckResult(
                f"Browser {name}",
                "fail" if name == BROWSER_NAMES[0] else "warn",
                f"{name} browser not installed",
                fix=f"Install: playwright install {name}",
            )
        )
    return results


async def check_axe_script(source: AxeScriptSource) -> CheckResult:
    """Verify the axe-core bundle can be read or downloaded."""
    try:
        script = await source.load()
    except ScanError as exc:
        return CheckResult(
            "axe-core",
            "fail",
            f"axe-core bundle unavailable: {exc}",
            fix="Set AXE_SCANNER_AXE_SOURCE to a reachable URL or a local axe.min.js",
        )
    size_kb = len(script.encode("utf-8")) / 1024
    return CheckResult("axe-core", "pass", f"axe-core: {source.source} ({size_kb:.0f} KB)")
