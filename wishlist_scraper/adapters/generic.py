from __future__ import annotations

from .base import SelectorAdapter


class GenericAdapter(SelectorAdapter):
    """
    A domain-agnostic adapter relying on Open Graph / meta tags and common
    price markup. Acts as a safe fallback when no specific adapter matches a URL.
    """
    name = "generic"
    host_markers = ()  # matches any

    def matches(self, url: str) -> bool:  # pragma: no cover - trivial
        return True
