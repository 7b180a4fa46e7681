"""Browser engine selection and launch."""

import logging

from playwright.async_api import Browser, BrowserType, Playwright
from playwright.async_api import Error as PlaywrightError

from .errors import LaunchError
from .models import BrowserName

logger = logging.getLogger(__name__)

BROWSER_NAMES: tuple[BrowserName, ...] = ("chromium", "firefox", "webkit")


def select_browser_type(playwright: Playwright, name: BrowserName) -> BrowserType:
    """Return the engine launcher for ``name``; unknown names are rejected."""
    if name not in BROWSER_NAMES:
        raise LaunchError(f"Unknown browser engine: {name}. Available: {', '.join(BROWSER_NAMES)}")
    return getattr(playwright, name)


async def launch_browser(playwright: Playwright, name: BrowserName, headless: bool) -> Browser:
    browser_type = select_browser_type(playwright, name)
    logger.debug("Launching %s (headless=%s)", name, headless)
    try:
        return await browser_type.launch(headless=headless)
    except PlaywrightError as exc:
        raise LaunchError(exc.message) from exc
