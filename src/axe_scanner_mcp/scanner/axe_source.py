"""Loading of the axe-core JavaScript bundle, with a local download cache."""

import asyncio
import hashlib
import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx

from axe_scanner_mcp.config import get_axe_source, get_cache_dir

from .errors import AxeScriptError

logger = logging.getLogger(__name__)


class AxeScriptSource:
    """Provide the axe-core script text from a local file or a cached URL download."""

    def __init__(
        self,
        source: str,
        cache_dir: Path | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.source = source
        self.cache_dir = cache_dir
        self.timeout = timeout
        self._transport = transport
        self._script: str | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, work_dir: Path | None = None) -> "AxeScriptSource":
        return cls(get_axe_source(work_dir), cache_dir=get_cache_dir(work_dir))

    @property
    def is_remote(self) -> bool:
        return urlparse(self.source).scheme in ("http", "https")

    def cache_path(self) -> Path | None:
        """Cache file for a remote source, keyed by the URL."""
        if not self.is_remote or self.cache_dir is None:
            return None
        digest = hashlib.sha256(self.source.encode("utf-8")).hexdigest()[:16]
        return self.cache_dir / f"axe-{digest}.min.js"

    async def load(self) -> str:
        """Return the script text, reading or downloading it on first use."""
        if self._script is not None:
            return self._script
        async with self._lock:
            if self._script is None:
                self._script = await self._fetch()
        return self._script

    async def _fetch(self) -> str:
        if not self.is_remote:
            return self._read_file(Path(self.source).expanduser())

        cache_file = self.cache_path()
        if cache_file is not None and cache_file.exists():
            logger.debug("Using cached axe-core bundle %s", cache_file)
            return self._read_file(cache_file)

        script = await self._download()
        if cache_file is not None:
            self._write_cache(cache_file, script)
        return script

    async def _download(self) -> str:
        logger.info("Downloading axe-core bundle from %s", self.source)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.source)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise AxeScriptError(f"Failed to download axe-core from {self.source}: {exc}") from exc
        if not response.text.strip():
            raise AxeScriptError(f"Empty axe-core bundle downloaded from {self.source}")
        return response.text

    def _read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise AxeScriptError(f"Failed to read axe-core bundle {path}: {exc}") from exc

    def _write_cache(self, cache_file: Path, script: str) -> None:
        try:
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            cache_file.write_text(script, encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not cache axe-core bundle at %s: %s", cache_file, exc)
