from __future__ import annotations

import math
import re
from typing import List, NamedTuple, Optional, Pattern, Tuple

# Grouping conventions. "us": 1,299.99 / "eu": 1.299,99
_US_AMOUNT = r"\d+(?:,\d{3})*(?:\.\d{2})?"
_EU_AMOUNT = r"\d+(?:\.\d{3})*(?:,\d{2})?"

DEFAULT_CURRENCY = "USD"


class PriceMatch(NamedTuple):
    price: Optional[float]
    currency: Optional[str]


class PricePattern(NamedTuple):
    name: str
    regex: Pattern[str]
    # None means "scan the text for a currency marker".
    currency: Optional[str]
    style: str


#: Ordered cascade; the first pattern yielding a finite amount wins.
PRICE_PATTERNS: List[PricePattern] = [
    PricePattern("dollar-prefix", re.compile(r"\$(" + _US_AMOUNT + ")"), "USD", "us"),
    PricePattern("usd-suffix", re.compile(r"(?<![\d.,])(" + _US_AMOUNT + r")USD", re.IGNORECASE), "USD", "us"),
    PricePattern("euro-prefix", re.compile(r"€(" + _EU_AMOUNT + r")(?![\d.,])"), "EUR", "eu"),
    PricePattern("euro-suffix", re.compile(r"(?<![\d.,])(" + _EU_AMOUNT + ")€"), "EUR", "eu"),
    PricePattern("eur-code-prefix", re.compile(r"EUR(" + _EU_AMOUNT + r")(?![\d.,])", re.IGNORECASE), "EUR", "eu"),
    PricePattern("eur-code-suffix", re.compile(r"(?<![\d.,])(" + _EU_AMOUNT + ")EUR", re.IGNORECASE), "EUR", "eu"),
    PricePattern("pound-prefix", re.compile(r"£(" + _US_AMOUNT + ")"), "GBP", "us"),
    PricePattern("bare-amount", re.compile("(" + _US_AMOUNT + ")"), None, "us"),
]

#: Markers consulted, in order, when the matching pattern carries no currency.
CURRENCY_MARKERS: List[Tuple[Pattern[str], str]] = [
    (re.compile(re.escape("$")), "USD"),
    (re.compile(re.escape("€")), "EUR"),
    (re.compile(re.escape("£")), "GBP"),
    (re.compile("USD", re.IGNORECASE), "USD"),
    (re.compile("EUR", re.IGNORECASE), "EUR"),
    (re.compile("GBP", re.IGNORECASE), "GBP"),
]

_WHITESPACE = re.compile(r"\s+")


def _to_float(raw: str, style: str) -> Optional[float]:
    if style == "eu":
        raw = raw.replace(".", "").replace(",", ".")
    else:
        raw = raw.replace(",", "")
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def detect_currency(text: str) -> str:
    """Return the first currency marker found in ``text``, else USD."""
    for marker, code in CURRENCY_MARKERS:
        if marker.search(text):
            return code
    return DEFAULT_CURRENCY


def parse_price(text: Optional[str]) -> PriceMatch:
    """
    Extract an amount and a currency code from free text such as
    "$1,299.99", "1,299.99 USD", "€99,99" or "£50.00".

    Never raises: text without a usable amount yields ``PriceMatch(None, None)``.
    """
    if not text:
        return PriceMatch(None, None)

    normalized = _WHITESPACE.sub("", text)
    for pattern in PRICE_PATTERNS:
        match = pattern.regex.search(normalized)
        if not match:
            continue
        price = _to_float(match.group(1), pattern.style)
        if price is None:
            continue
        currency = pattern.currency or detect_currency(normalized)
        return PriceMatch(price, currency)

    return PriceMatch(None, None)


def parse_amount(value: Optional[str]) -> Optional[float]:
    """
    Parse a structured amount (an Open Graph or microdata ``content`` value,
    e.g. "19.99" or "1,299.00"). Returns None unless finite and non-negative.
    """
    if value is None:
        return None
    raw = _WHITESPACE.sub("", str(value)).replace(",", "")
    if not raw:
        return None
    try:
        amount = float(raw)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return amount


def normalize_currency(code: Optional[str]) -> Optional[str]:
    """Upper-case a three-letter currency code; anything else becomes None."""
    if not code:
        return None
    code = code.strip().upper()
    return code if len(code) == 3 and code.isalpha() else None
