"""Run axe-core inside a Playwright page."""

import logging
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .axe_config import AxeRunConfig
from .axe_source import AxeScriptSource
from .errors import AnalysisError
from .models import RESULT_GROUPS

logger = logging.getLogger(__name__)

CONFIGURE_SCRIPT = "(origins) => { window.axe.configure({ allowedOrigins: origins }); }"

RUN_SCRIPT = """async ({ context, options }) => {
  const result = await window.axe.run(context || document, options);
  return JSON.parse(JSON.stringify(result));
}"""


class AxeRunner:
    """Inject axe-core into every frame and run it from the top frame."""

    def __init__(self, script_source: AxeScriptSource):
        self.script_source = script_source

    async def analyze(self, page: Page, config: AxeRunConfig) -> dict[str, Any]:
        if config.selects_nothing():
            # axe.run rejects an empty runOnly rule list.
            logger.info("Every selected rule is disabled; skipping axe-core run")
            return {group: [] for group in RESULT_GROUPS}
        script = await self.script_source.load()
        try:
            await self._inject(page, script)
            origins = config.allowed_origins()
            if origins is not None:
                await page.evaluate(CONFIGURE_SCRIPT, origins)
            analysis = await page.evaluate(
                RUN_SCRIPT,
                {"context": config.context(), "options": config.options()},
            )
        except PlaywrightError as exc:
            raise AnalysisError(exc.message) from exc

        if not isinstance(analysis, dict):
            raise AnalysisError(f"axe-core returned an unexpected result: {type(analysis).__name__}")
        return analysis

    async def _inject(self, page: Page, script: str) -> None:
        await page.main_frame.evaluate(script)
        for frame in page.frames:
            if frame is page.main_frame:
                continue
            try:
                await frame.evaluate(script)
            except PlaywrightError as exc:
                # Frames can detach mid-injection; axe reports untested frames itself.
                logger.debug("Skipping frame %s: %s", frame.url, exc.message)
