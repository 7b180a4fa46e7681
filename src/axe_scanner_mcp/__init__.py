"""axe-scanner-mcp package."""

__all__ = ["app", "main", "scan_app", "scan_main"]


def _patch_subprocess_transport() -> None:
    """
    Patch asyncio subprocess transport to suppress 'Event loop is closed' error.

    Playwright's driver and the MCP server both run as subprocesses; their
    transports can be garbage collected after the event loop closes and raise
    RuntimeError in ``__del__``.
    """
    import asyncio.base_subprocess

    _original_del = asyncio.base_subprocess.BaseSubprocessTransport.__del__

    def _patched_del(self):
        try:
            _original_del(self)
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise

    asyncio.base_subprocess.BaseSubprocessTransport.__del__ = _patched_del


# Apply patch on import
_patch_subprocess_transport()


def __getattr__(name: str):
    if name in __all__:
        from axe_scanner_mcp import cli

        return getattr(cli, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
