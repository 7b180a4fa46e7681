"""Test configuration and fixtures for axe-scanner-mcp."""

import tempfile
from collections.abc import AsyncIterator, Generator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import pytest
from playwright.async_api import Error as PlaywrightError

from axe_scanner_mcp.scanner import AxeRunner, AxeScanner
from axe_scanner_mcp.scanner.axe_runner import CONFIGURE_SCRIPT, RUN_SCRIPT

FAKE_AXE_SCRIPT = "window.axe = window.axe || {};"


class FakeFrame:
    """Frame that records script injection."""

    def __init__(self, env: "FakePlaywright", url: str, detached: bool = False):
        self.env = env
        self.url = url
        self.detached = detached

    async def evaluate(self, script: str, arg: Any = None) -> None:
        if self.detached:
            raise PlaywrightError("Frame was detached")
        self.env.record("inject", self.url)


class FakePage:
    """Page recording every navigation and axe call."""

    def __init__(self, env: "FakePlaywright"):
        self.env = env
        self.main_frame = FakeFrame(env, "main")
        self.frames = [self.main_frame, *env.child_frames]

    async def goto(self, url: str, wait_until: str | None = None, timeout: float | None = None):
        self.env.record("goto", {"url": url, "wait_until": wait_until, "timeout": timeout})
        self.env.maybe_fail("goto")

    async def wait_for_selector(self, selector: str, timeout: float | None = None):
        self.env.record("wait_for_selector", {"selector": selector, "timeout": timeout})
        self.env.maybe_fail("wait_for_selector")

    async def wait_for_timeout(self, timeout: float) -> None:
        self.env.record("wait_for_timeout", timeout)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        if script == CONFIGURE_SCRIPT:
            self.env.record("axe.configure", arg)
            return None
        if script == RUN_SCRIPT:
            self.env.record("axe.run", arg)
            self.env.maybe_fail("axe.run")
            return self.env.analysis
        raise AssertionError(f"unexpected script: {script[:40]}")


class FakeContext:
    def __init__(self, env: "FakePlaywright", options: dict[str, Any]):
        self.env = env
        self.options = options
        self.closed = False

    async def new_page(self) -> FakePage:
        self.env.record("new_page", None)
        self.env.maybe_fail("new_page")
        return FakePage(self.env)

    async def close(self) -> None:
        self.closed = True
        self.env.record("context.close", None)
        self.env.maybe_fail("context.close")


class FakeBrowser:
    def __init__(self, env: "FakePlaywright", name: str, headless: bool):
        self.env = env
        self.name = name
        self.headless = headless
        self.contexts: list[FakeContext] = []
        self.closed = False

    async def new_context(self, **options: Any) -> FakeContext:
        self.env.record("new_context", options)
        self.env.maybe_fail("new_context")
        context = FakeContext(self.env, options)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True
        self.env.record("browser.close", self.name)
        self.env.maybe_fail("browser.close")


class FakeBrowserType:
    def __init__(self, env: "FakePlaywright", name: str):
        self.env = env
        self.name = name

    async def launch(self, headless: bool = True) -> FakeBrowser:
        self.env.record("launch", {"browser": self.name, "headless": headless})
        self.env.maybe_fail("launch")
        browser = FakeBrowser(self.env, self.name, headless)
        self.env.browsers.append(browser)
        return browser


class FakePlaywright:
    """Stand-in for the object yielded by ``async_playwright()``."""

    def __init__(self, analysis: dict[str, Any]):
        self.analysis = analysis
        self.events: list[tuple[str, Any]] = []
        self.failures: dict[str, Exception] = {}
        self.browsers: list[FakeBrowser] = []
        self.child_frames: list[FakeFrame] = []
        self.chromium = FakeBrowserType(self, "chromium")
        self.firefox = FakeBrowserType(self, "firefox")
        self.webkit = FakeBrowserType(self, "webkit")

    def add_child_frame(self, url: str, detached: bool = False) -> None:
        self.child_frames.append(FakeFrame(self, url, detached=detached))

    def record(self, step: str, detail: Any) -> None:
        self.events.append((step, detail))

    def maybe_fail(self, step: str) -> None:
        if step in self.failures:
            raise self.failures[step]

    def steps(self) -> list[str]:
        return [step for step, _ in self.events]

    def detail(self, step: str) -> Any:
        for name, detail in self.events:
            if name == step:
                return detail
        raise KeyError(step)

    @asynccontextmanager
    async def factory(self) -> AsyncIterator["FakePlaywright"]:
        self.record("playwright.start", None)
        try:
            yield self
        finally:
            self.record("playwright.stop", None)


class FakeScriptSource:
    """Script source that never touches disk or network."""

    source = "memory://axe.min.js"

    def __init__(self, script: str = FAKE_AXE_SCRIPT):
        self.script = script
        self.loads = 0

    async def load(self) -> str:
        self.loads += 1
        return self.script


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Point home and cwd at an empty temp dir and clear AXE_SCANNER_* variables."""
    home = temp_dir / "home"
    work = temp_dir / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    for key in (
        "AXE_SCANNER_AXE_SOURCE",
        "AXE_SCANNER_CACHE_DIR",
        "AXE_SCANNER_LOG_LEVEL",
        "AXE_SCANNER_SERVER_COMMAND",
    ):
        monkeypatch.delenv(key, raising=False)
    return work


@pytest.fixture
def sample_analysis() -> dict[str, Any]:
    """An axe result with 2 violations, 3 passes, 1 incomplete and 4 inapplicable rules."""
    return {
        "testEngine": {"name": "axe-core", "version": "4.10.2"},
        "url": "https://example.com/",
        "violations": [
            {
                "id": "image-alt",
                "impact": "critical",
                "tags": ["wcag2a", "wcag111"],
                "nodes": [{"target": ["img.hero"], "html": '<img class="hero">'}],
            },
            {
                "id": "link-name",
                "impact": "serious",
                "tags": ["wcag2a", "wcag244"],
                "nodes": [{"target": ["a.icon"], "html": '<a class="icon"></a>'}],
            },
        ],
        "passes": [{"id": "html-has-lang"}, {"id": "document-title"}, {"id": "bypass"}],
        "incomplete": [{"id": "color-contrast"}],
        "inapplicable": [
            {"id": "audio-caption"},
            {"id": "video-caption"},
            {"id": "frame-title"},
            {"id": "input-button-name"},
        ],
    }


@pytest.fixture
def fake_playwright(sample_analysis: dict[str, Any]) -> FakePlaywright:
    return FakePlaywright(sample_analysis)


@pytest.fixture
def script_source() -> FakeScriptSource:
    return FakeScriptSource()


@pytest.fixture
def scanner(fake_playwright: FakePlaywright, script_source: FakeScriptSource) -> AxeScanner:
    """AxeScanner wired to the fake Playwright object graph."""
    return AxeScanner(AxeRunner(script_source), playwright_factory=fake_playwright.factory)
