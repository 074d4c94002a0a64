from __future__ import annotations

from .base import SelectorAdapter


class TargetAdapter(SelectorAdapter):
    name = "target"
    host_markers = ("target.com",)

    title_selectors = ("h1[data-test='product-title']",)
    description_selectors = ("div[data-test='item-details-description']",)
    image_selectors = (
        ("img[data-test='product-image']", ("data-src", "src")),
    )
    price_selectors = (
        ("span[data-test='product-price']", None),
        ("div[data-test='product-price']", None),
    )
