from __future__ import annotations

from abc import ABC, abstractmethod

from ..adapters.base import ExtractionResult
from ..adapters.registry import build_registry
from ..config import ScrapeConfig
from ..utils.loader import load_symbol


class ScrapeEngine(ABC):
    """
    Abstract engine interface. Implementations own the pipeline lifecycle:
    each call either returns an ExtractionResult or raises a ScrapeError.
    """
    @abstractmethod
    async def scrape(self, raw_url: str) -> ExtractionResult:  # pragma: no cover - interface
        ...


def build_engine(config: ScrapeConfig) -> ScrapeEngine:
    """Instantiate the configured engine class with the configured adapters."""
    # Dynamic engine loading so upgrades don't require code edits.
    engine_cls = load_symbol(config.engine)
    return engine_cls(config, registry=build_registry(config.extra_adapters))
