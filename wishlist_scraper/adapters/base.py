from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Protocol, Sequence, Tuple

from bs4 import BeautifulSoup

from ..utils.parsing import (
    host_of,
    link_href,
    make_soup,
    meta_content,
    node_text,
    select_attr,
    select_text,
    clean_text,
)
from ..utils.price import (
    DEFAULT_CURRENCY,
    PriceMatch,
    normalize_currency,
    parse_amount,
    parse_price,
)

NO_PRICE = PriceMatch(None, None)

#: Class/attribute conventions widely reused across e-commerce templates.
COMMON_PRICE_SELECTORS: Tuple[Tuple[str, Optional[str]], ...] = (
    (".price", None),
    ("[data-price]", None),
    (".product-price", None),
    ("[itemprop='price']", None),
    (".a-price .a-offscreen", None),
)

#: Open Graph style (amount, currency) meta pairs.
STRUCTURED_PRICE_KEYS: Tuple[Tuple[str, str], ...] = (
    ("og:price:amount", "og:price:currency"),
    ("product:price:amount", "product:price:currency"),
)


@dataclass(frozen=True)
class ExtractionResult:
    """
    Best-effort product data read from one fetched page.
    ``None`` means "not found"; only ``source_url`` is always present.
    """

    source_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        if self.price is None and self.currency is not None:
            raise ValueError("currency requires a price")
        if self.price is not None:
            if self.currency is None:
                raise ValueError("price requires a currency")
            if not math.isfinite(self.price) or self.price < 0:
                raise ValueError(f"price must be a finite, non-negative number, got {self.price!r}")

    @classmethod
    def build(
        cls,
        source_url: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        price: Optional[float] = None,
        currency: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> "ExtractionResult":
        """Constructor used by adapters: a bare price gets USD, a lone currency is dropped."""
        if price is None:
            currency = None
        elif currency is None:
            currency = DEFAULT_CURRENCY
        return cls(
            source_url=source_url,
            title=title,
            description=description,
            price=price,
            currency=currency,
            image_url=image_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        # Absent fields stay in the payload as null; the form UI keys off them.
        return {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "currency": self.currency,
            "imageUrl": self.image_url,
            "sourceUrl": self.source_url,
        }


class SiteAdapter(Protocol):
    """
    Interface for site-specific extraction logic.
    Keep this small and stable so adapters rarely break across upgrades.
    """

    name: str
    host_markers: Sequence[str]  # substrings of the host, e.g. ["amazon."]

    def matches(self, url: str) -> bool:
        """Return True if this adapter should handle the given URL."""
        ...

    def extract(self, markup: str, url: str) -> ExtractionResult:
        """
        Given already-fetched markup and the normalized URL, return product data.
        Must not perform I/O; missing fields are None, never an exception.
        """
        ...


class SelectorAdapter:
    """
    Shared fallback-chain algorithm. For every field the site-specific
    selectors are tried first, then Open Graph / meta tags; first hit wins.
    Subclasses only declare selector tables (and optionally ``site_price``).
    """

    name = "selector"
    host_markers: Tuple[str, ...] = ()

    title_selectors: Tuple[str, ...] = ()
    description_selectors: Tuple[str, ...] = ()
    # (css, attributes tried in order)
    image_selectors: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    # (css, attribute or None for element text)
    price_selectors: Tuple[Tuple[str, Optional[str]], ...] = ()

    def matches(self, url: str) -> bool:
        host = host_of(url)
        return any(marker in host for marker in self.host_markers)

    def extract(self, markup: str, url: str) -> ExtractionResult:
        soup = make_soup(markup)
        price, currency = self.extract_price(soup)
        return ExtractionResult.build(
            url,
            title=self.extract_title(soup),
            description=self.extract_description(soup),
            price=price,
            currency=currency,
            image_url=self.extract_image(soup),
        )

    # ---- Field chains -------------------------------------------------------

    def extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        return (
            select_text(soup, self.title_selectors)
            or meta_content(soup, "og:title")
            or node_text(soup.find("title"))
        )

    def extract_description(self, soup: BeautifulSoup) -> Optional[str]:
        return (
            select_text(soup, self.description_selectors)
            or meta_content(soup, "og:description")
            or meta_content(soup, "description")
        )

    def extract_image(self, soup: BeautifulSoup) -> Optional[str]:
        return (
            select_attr(soup, self.image_selectors)
            or meta_content(soup, "og:image")
            or link_href(soup, "image_src")
        )

    def extract_price(self, soup: BeautifulSoup) -> PriceMatch:
        attempts: Iterable[Callable[[BeautifulSoup], PriceMatch]] = (
            self.site_price,
            lambda s: price_from_selectors(s, self.price_selectors),
            structured_price,
            lambda s: price_from_selectors(s, COMMON_PRICE_SELECTORS),
        )
        for attempt in attempts:
            match = attempt(soup)
            if match.price is not None:
                return match
        return NO_PRICE

    def site_price(self, soup: BeautifulSoup) -> PriceMatch:
        """Hook for prices that no single selector captures."""
        return NO_PRICE

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


# ---- Price helpers ----------------------------------------------------------

def price_from_selectors(
    soup: BeautifulSoup, candidates: Iterable[Tuple[str, Optional[str]]]
) -> PriceMatch:
    """First candidate whose attribute/text parses as a price."""
    for css, attr in candidates:
        node = soup.select_one(css)
        if node is None:
            continue
        raw = node.get(attr) if attr else node.get_text(" ")
        match = parse_price(clean_text(raw))
        if match.price is not None:
            return match
    return NO_PRICE


def structured_price(soup: BeautifulSoup) -> PriceMatch:
    """
    Machine-readable price signals: Open Graph amount/currency pairs, then
    schema.org microdata (``itemprop="price"`` with a ``content`` attribute).
    """
    for amount_key, currency_key in STRUCTURED_PRICE_KEYS:
        amount = parse_amount(meta_content(soup, amount_key))
        if amount is not None:
            return PriceMatch(amount, normalize_currency(meta_content(soup, currency_key)) or DEFAULT_CURRENCY)

    node = soup.select_one("[itemprop='price'][content]")
    if node is not None:
        amount = parse_amount(node.get("content"))
        if amount is not None:
            currency_node = soup.select_one("[itemprop='priceCurrency']")
            currency = None
            if currency_node is not None:
                currency = normalize_currency(currency_node.get("content") or node_text(currency_node))
            return PriceMatch(amount, currency or DEFAULT_CURRENCY)
    return NO_PRICE
