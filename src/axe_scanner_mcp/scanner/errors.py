"""Failures raised while running an accessibility scan."""


class ScanError(RuntimeError):
    """Base class for scan failures; the message is reported to the caller verbatim."""


class LaunchError(ScanError):
    """The browser engine could not be started."""


class NavigationError(ScanError):
    """Page load or selector wait failed."""


class AnalysisError(ScanError):
    """axe-core could not be loaded or its run failed."""


class AxeScriptError(AnalysisError):
    """The axe-core bundle could not be read or downloaded."""
