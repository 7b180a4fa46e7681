"""Runtime access to public CLI facade symbols.

Command modules resolve dependencies from ``axe_scanner_mcp.cli`` at call time so
tests can monkeypatch facade-level symbols (for example ``call_scan`` or ``serve_stdio``).
"""

from importlib import import_module
from types import ModuleType


def cli_module() -> ModuleType:
    """Return the public CLI facade module."""
    return import_module("axe_scanner_mcp.cli")
