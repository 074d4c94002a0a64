from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from importlib import metadata

from .base import SiteAdapter
from .generic import GenericAdapter
from .amazon import AmazonAdapter
from .target import TargetAdapter
from .walmart import WalmartAdapter
from .bestbuy import BestBuyAdapter
from ..utils.loader import load_symbol

logger = logging.getLogger(__name__)

#: Built-in retailer adapters in priority order.
BUILTIN_ADAPTERS = (AmazonAdapter, TargetAdapter, WalmartAdapter, BestBuyAdapter)

ENTRY_POINT_GROUP = "wishlist_scraper.adapters"


class AdapterRegistry:
    """
    Ordered registry of site adapters with a generic fallback.
    Supports built-ins, config-defined dotted classes, and entry-point plugins.
    """
    def __init__(
        self,
        adapters: Optional[Iterable[SiteAdapter]] = None,
        default: Optional[SiteAdapter] = None,
    ) -> None:
        if adapters is None:
            adapters = [cls() for cls in BUILTIN_ADAPTERS]
        self._adapters: List[SiteAdapter] = list(adapters)
        self._default: SiteAdapter = default or GenericAdapter()

    # ---- Introspection / Management ----

    def register(self, adapter: SiteAdapter) -> None:
        """Append an adapter; it is consulted after every adapter registered before it."""
        self._adapters.append(adapter)
        logger.debug("Registered adapter %s", getattr(adapter, "name", adapter))

    @property
    def adapters(self) -> List[SiteAdapter]:
        return list(self._adapters)

    @property
    def default(self) -> SiteAdapter:
        return self._default

    def match(self, url: str) -> SiteAdapter:
        # Specific adapters in registration order, generic fallback last.
        for a in self._adapters:
            if a.matches(url):
                return a
        return self._default

    # ---- Discovery ----

    def discover_entry_points(self, group: str = ENTRY_POINT_GROUP) -> int:
        """
        Discover third-party adapters installed as entry points.
        Returns count of newly registered adapters.
        """
        added = 0
        for ep in metadata.entry_points(group=group):
            try:
                adapter_cls = ep.load()
                self.register(adapter_cls())
            except Exception as exc:
                # Plugins are optional; one broken package must not disable scraping.
                logger.warning("Skipping adapter plugin %s: %r", ep.name, exc)
                continue
            added += 1
        return added


def select_adapter(url: str, registry: Optional[AdapterRegistry] = None) -> SiteAdapter:
    """Pick the adapter for a normalized URL. Never fails: Generic is the default."""
    return (registry or AdapterRegistry()).match(url)


def build_registry(extra_adapters: Iterable[str] = (), *, discover: bool = True) -> AdapterRegistry:
    """
    Registry with the built-ins, then installed plugins, then the dotted
    class paths from configuration (lowest priority).
    """
    registry = AdapterRegistry()
    if discover:
        registry.discover_entry_points()
    # Allow runtime registration of additional adapters
    for dotted in extra_adapters:
        try:
            adapter_cls = load_symbol(dotted)
            registry.register(adapter_cls())
        except Exception as exc:
            logger.warning("Failed to load adapter %s: %r", dotted, exc)
    return registry
