"""Drive one browser session through navigation and an axe-core run."""

import logging
import time
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from .axe_config import build_run_config
from .axe_runner import AxeRunner
from .axe_source import AxeScriptSource
from .browser import launch_browser
from .errors import LaunchError, NavigationError
from .models import ScanRequest, ScanResult

logger = logging.getLogger(__name__)

PlaywrightFactory = Callable[[], AbstractAsyncContextManager[Playwright]]


async def _close_quietly(resource: Browser | BrowserContext, label: str) -> None:
    """Close ``resource``, logging a failure instead of raising it."""
    try:
        await resource.close()
    except PlaywrightError as exc:
        logger.warning("Failed to close %s: %s", label, exc.message)


class AxeScanner:
    """Run accessibility scans, one browser instance per call."""

    def __init__(
        self,
        runner: AxeRunner,
        playwright_factory: PlaywrightFactory = async_playwright,
    ):
        self.runner = runner
        self._playwright_factory = playwright_factory

    @classmethod
    def from_config(cls, work_dir: Path | None = None) -> "AxeScanner":
        return cls(AxeRunner(AxeScriptSource.from_config(work_dir)))

    async def scan(self, request: ScanRequest) -> ScanResult:
        """Launch, navigate, settle and analyze; the browser is always closed."""
        started = time.perf_counter()
        async with self._playwright_factory() as playwright:
            browser = await launch_browser(playwright, request.browser, request.headless)
            try:
                try:
                    context = await browser.new_context(**request.context_options())
                except PlaywrightError as exc:
                    raise LaunchError(exc.message) from exc
                try:
                    analysis = await self._analyze_page(context, request)
                finally:
                    await _close_quietly(context, "browser context")
            finally:
                await _close_quietly(browser, "browser")

        result = ScanResult(url=request.url, analysis=analysis)
        summary = result.summary
        logger.info(
            "Scanned %s in %.1fs: %d violations, %d passes",
            request.url,
            time.perf_counter() - started,
            summary.violations,
            summary.passes,
        )
        return result

    async def _analyze_page(
        self, context: BrowserContext, request: ScanRequest
    ) -> dict[str, Any]:
        timeout = request.navigation_timeout_ms
        try:
            page = await context.new_page()
        except PlaywrightError as exc:
            raise LaunchError(exc.message) from exc

        try:
            logger.debug("Navigating to %s (wait_until=%s)", request.url, request.wait_until)
            await page.goto(request.url, wait_until=request.wait_until, timeout=timeout)
            if request.wait_for_selector:
                logger.debug("Waiting for selector %s", request.wait_for_selector)
                await page.wait_for_selector(request.wait_for_selector, timeout=timeout)
        except PlaywrightError as exc:
            raise NavigationError(exc.message) from exc

        if request.post_navigation_wait_ms > 0:
            await page.wait_for_timeout(request.post_navigation_wait_ms)

        config = build_run_config(request)
        logger.debug("Running axe-core with options %s", config.options())
        return await self.runner.analyze(page, config)
