from __future__ import annotations

import logging
from typing import Optional

from .base import ScrapeEngine
from ..config import ScrapeConfig
from ..adapters.registry import AdapterRegistry
from ..adapters.base import ExtractionResult
from ..errors import ExtractionError
from ..utils.http import PageFetcher
from ..utils.parsing import normalize_url

logger = logging.getLogger(__name__)


class SimpleScrapeEngine(ScrapeEngine):
    """
    Single-pass, fail-fast pipeline.
    - Normalizer rejects bad input before any I/O.
    - Fetcher owns HTTP (one attempt, bounded by the configured timeout).
    - Adapters own parsing; the registry picks exactly one.
    """
    def __init__(
        self,
        config: Optional[ScrapeConfig] = None,
        registry: AdapterRegistry | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        self.config = config or ScrapeConfig()
        self.registry = registry or AdapterRegistry()
        self.fetcher = fetcher or PageFetcher(
            timeout=self.config.request_timeout,
            user_agent=self.config.user_agent,
        )

    async def scrape(self, raw_url: str) -> ExtractionResult:
        url = normalize_url(raw_url)
        html = await self.fetcher.fetch(url)

        adapter = self.registry.match(url)
        name = getattr(adapter, "name", type(adapter).__name__)
        logger.debug("Using adapter %s for %s", name, url)
        try:
            result = adapter.extract(html, url)
        except Exception as exc:
            raise ExtractionError(name, url, exc) from exc

        logger.info("Scraped %s via %s (title=%s, price=%s %s)",
                    url, name, bool(result.title), result.price, result.currency or "")
        return result


async def scrape(
    raw_url: str,
    *,
    config: Optional[ScrapeConfig] = None,
    registry: Optional[AdapterRegistry] = None,
    fetcher: Optional[PageFetcher] = None,
) -> ExtractionResult:
    """
    Fetch ``raw_url`` and extract product data from it.

    Raises InvalidUrlError (nothing fetched), FetchError, or ExtractionError.
    """
    engine = SimpleScrapeEngine(config, registry=registry, fetcher=fetcher)
    return await engine.scrape(raw_url)
