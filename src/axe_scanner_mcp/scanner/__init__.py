"""Accessibility scan orchestration on top of Playwright and axe-core."""

from .axe_config import AxeRunConfig, RunOnly, build_run_config
from .axe_runner import AxeRunner
from .axe_source import AxeScriptSource
from .errors import AnalysisError, AxeScriptError, LaunchError, NavigationError, ScanError
from .models import ScanRequest, ScanResult, ScanSummary, Viewport
from .orchestrator import AxeScanner

__all__ = [
    "AnalysisError",
    "AxeRunConfig",
    "AxeRunner",
    "AxeScanner",
    "AxeScriptError",
    "AxeScriptSource",
    "LaunchError",
    "NavigationError",
    "RunOnly",
    "ScanError",
    "ScanRequest",
    "ScanResult",
    "ScanSummary",
    "Viewport",
    "build_run_config",
]
