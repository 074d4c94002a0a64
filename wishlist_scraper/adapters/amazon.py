from __future__ import annotations

import re

from bs4 import BeautifulSoup

from .base import NO_PRICE, SelectorAdapter
from ..utils.parsing import node_text
from ..utils.price import PriceMatch, detect_currency, parse_amount

_DIGITS = re.compile(r"\D")


class AmazonAdapter(SelectorAdapter):
    """Amazon product pages on any country domain (amazon.com, amazon.co.uk, ...)."""

    name = "amazon"
    host_markers = ("amazon.",)

    title_selectors = ("#productTitle", "span[id='productTitle']")
    description_selectors = ("#feature-bullets ul li",)
    # data-old-hires carries the full-size image; src is often a placeholder.
    image_selectors = (
        ("#landingImage", ("data-old-hires", "src")),
        ("#imgBlkFront", ("src",)),
        ("img[data-old-hires]", ("data-old-hires",)),
    )
    price_selectors = (
        (".a-price .a-offscreen", None),
        ("#priceblock_ourprice", None),
        ("#priceblock_dealprice", None),
        (".a-price-whole", None),
    )

    def site_price(self, soup: BeautifulSoup) -> PriceMatch:
        """Amazon renders the price as separate whole/fraction/symbol spans."""
        whole = _DIGITS.sub("", node_text(soup.select_one(".a-price-whole")) or "")
        if not whole:
            return NO_PRICE
        fraction = _DIGITS.sub("", node_text(soup.select_one(".a-price-fraction")) or "") or "00"
        symbol = node_text(soup.select_one(".a-price-symbol"))
        currency = detect_currency(symbol) if symbol else None
        amount = parse_amount(f"{whole}.{fraction}")
        if amount is None:
            return NO_PRICE
        return PriceMatch(amount, currency)
