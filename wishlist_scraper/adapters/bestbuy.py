from __future__ import annotations

from .base import SelectorAdapter


class BestBuyAdapter(SelectorAdapter):
    name = "bestbuy"
    host_markers = ("bestbuy.com",)

    title_selectors = ("h1.heading-5",)
    description_selectors = ("div.shop-product-description",)
    image_selectors = (
        ("img.primary-image", ("data-src", "src")),
    )
    price_selectors = (
        ("div[data-testid='customer-price'] span", None),
        (".priceView-hero-price span", None),
    )
