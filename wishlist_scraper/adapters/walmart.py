from __future__ import annotations

from .base import SelectorAdapter


class WalmartAdapter(SelectorAdapter):
    """Walmart exposes schema.org microdata on its product pages."""

    name = "walmart"
    host_markers = ("walmart.com",)

    title_selectors = ("h1[itemprop='name']",)
    description_selectors = ("div[itemprop='description']",)
    image_selectors = (
        ("img[itemprop='image']", ("data-src", "src")),
    )
    price_selectors = (
        ("span[itemprop='price']", "content"),
        ("span[itemprop='price']", None),
        (".price-characteristic", None),
    )
