"""Tests for turning tool arguments into response payloads."""

import json

import pytest
from playwright.async_api import Error as PlaywrightError

from axe_scanner_mcp.scanner import NavigationError, ScanRequest, ScanResult
from axe_scanner_mcp.server import (
    MISSING_BROWSER_HINT,
    failure_payload,
    handle_scan_request,
    render_payload,
)


class RecordingScanner:
    """Scanner stub that records requests and returns a fixed analysis."""

    def __init__(self, analysis=None, error: Exception | None = None):
        self.analysis = analysis or {}
        self.error = error
        self.requests: list[ScanRequest] = []

    async def scan(self, request: ScanRequest) -> ScanResult:
        self.requests.append(request)
        if self.error:
            raise self.error
        return ScanResult(url=request.url, analysis=self.analysis)


@pytest.mark.asyncio
async def test_success_payload_with_defaults(sample_analysis) -> None:
    scanner = RecordingScanner(sample_analysis)

    payload = await handle_scan_request({"url": "https://example.com"}, scanner)

    assert payload == {
        "success": True,
        "url": "https://example.com",
        "summary": {"violations": 2, "passes": 3, "incomplete": 1, "inapplicable": 4},
        "analysis": sample_analysis,
    }
    assert "summaryText" not in payload
    request = scanner.requests[0]
    assert request.tags == ["wcag2a"]
    assert request.browser == "chromium"
    assert request.headless is True
    assert request.post_navigation_wait_ms == 1000
    assert request.wait_until == "load"


@pytest.mark.asyncio
async def test_summary_text_when_requested(sample_analysis) -> None:
    scanner = RecordingScanner(sample_analysis)

    payload = await handle_scan_request(
        {"url": "https://example.com", "includeSummary": True}, scanner
    )

    assert payload["summaryText"] == (
        "Axe scan completed for https://example.com. Violations: 2. Passed rules: 3. "
        "Incomplete checks: 1. Inapplicable rules: 4."
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments",
    [
        {"url": "not-a-url"},
        {},
        None,
        {"url": "https://example.com", "browser": "opera"},
        {"url": "https://example.com", "postNavigationWaitMs": -5},
    ],
)
async def test_invalid_input_never_reaches_the_browser(arguments) -> None:
    scanner = RecordingScanner()

    payload = await handle_scan_request(arguments, scanner)

    assert payload["success"] is False
    assert payload["error"]
    assert "hint" not in payload
    assert scanner.requests == []


@pytest.mark.asyncio
async def test_scan_failure_becomes_payload() -> None:
    scanner = RecordingScanner(error=NavigationError("net::ERR_NAME_NOT_RESOLVED"))

    payload = await handle_scan_request({"url": "https://nowhere.invalid"}, scanner)

    assert payload == {"success": False, "error": "net::ERR_NAME_NOT_RESOLVED"}


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_payload() -> None:
    scanner = RecordingScanner(error=PlaywrightError("Target page, context or browser has been closed"))

    payload = await handle_scan_request({"url": "https://example.com"}, scanner)

    assert payload["success"] is False
    assert "has been closed" in payload["error"]


def test_missing_browser_gets_hint() -> None:
    payload = failure_payload(
        RuntimeError("BrowserType.launch: Executable doesn't exist at /root/.cache/ms-playwright")
    )

    assert payload["hint"] == MISSING_BROWSER_HINT
    assert payload["error"].startswith("BrowserType.launch")


def test_render_payload_is_indented_json() -> None:
    text = render_payload({"success": False, "error": "boom"})

    assert text == '{\n  "success": false,\n  "error": "boom"\n}'
    assert json.loads(text) == {"success": False, "error": "boom"}


def test_render_payload_keeps_unicode() -> None:
    text = render_payload({"success": True, "url": "https://例え.jp"})

    assert "例え" in text
