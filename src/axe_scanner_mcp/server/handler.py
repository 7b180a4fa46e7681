"""Turn raw ``axe_scan_url`` tool arguments into a JSON text payload.

Every outcome, including invalid input, becomes a payload dict; nothing
raised by validation or by the scan escapes ``handle_scan_request``.
"""

import json
import logging
from typing import Any, Protocol

from axe_scanner_mcp.scanner import ScanRequest, ScanResult

logger = logging.getLogger(__name__)

MISSING_BROWSER_SIGNATURE = "Executable doesn't exist"
MISSING_BROWSER_HINT = (
    "Playwright browsers are missing. Run `playwright install` "
    "(add --with-deps on Linux if prompted)."
)


class Scanner(Protocol):
    async def scan(self, request: ScanRequest) -> ScanResult: ...


async def handle_scan_request(arguments: Any, scanner: Scanner) -> dict[str, Any]:
    """Validate ``arguments``, run the scan and build the response payload."""
    try:
        request = ScanRequest.model_validate(arguments)
        result = await scanner.scan(request)
    except Exception as exc:
        logger.warning("Accessibility scan failed: %s", exc)
        return failure_payload(exc)
    return success_payload(request, result)


def success_payload(request: ScanRequest, result: ScanResult) -> dict[str, Any]:
    summary = result.summary
    payload: dict[str, Any] = {
        "success": True,
        "url": request.url,
        "summary": summary.as_dict(),
        "analysis": result.analysis,
    }
    if request.include_summary:
        payload["summaryText"] = summary.describe(request.url)
    return payload


def failure_payload(exc: BaseException) -> dict[str, Any]:
    message = str(exc)
    payload: dict[str, Any] = {"success": False, "error": message}
    if MISSING_BROWSER_SIGNATURE in message:
        payload["hint"] = MISSING_BROWSER_HINT
    return payload


def render_payload(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)
