from __future__ import annotations

import ipaddress
import re
from typing import Iterable, Optional, Sequence, Tuple
from urllib.parse import urlparse, urlunparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import InvalidUrlError

_HAS_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_HOST_LABEL = re.compile(r"^(?!-)[a-z0-9_-]{1,63}(?<!-)$")
_ALLOWED_SCHEMES = ("http", "https")


# ---- URLs ------------------------------------------------------------------

def normalize_url(raw: str) -> str:
    """
    Turn user input into a fetchable URL: prepend https:// when no scheme is
    given, require an http(s) scheme plus a valid host, drop the fragment.
    Raises InvalidUrlError; never touches the network.
    """
    candidate = (raw or "").strip()
    if not candidate:
        raise InvalidUrlError(raw or "", "URL is empty")
    if not _HAS_SCHEME.match(candidate):
        candidate = f"https://{candidate}"

    try:
        parsed = urlparse(candidate)
        host = parsed.hostname
        parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InvalidUrlError(raw, str(exc)) from exc

    scheme = parsed.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidUrlError(raw, f"unsupported scheme {parsed.scheme!r}")
    if not host or not _is_valid_host(host):
        raise InvalidUrlError(raw, "missing or malformed host")

    return urlunparse(parsed._replace(scheme=scheme, fragment=""))


def _is_valid_host(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    try:
        ascii_host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    labels = ascii_host.rstrip(".").split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


def host_of(url: str) -> str:
    """Lower-cased hostname of ``url`` ("" when there is none)."""
    return (urlparse(url).hostname or "").lower()


# ---- Markup ----------------------------------------------------------------

def make_soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup or "", "html.parser")


def clean_text(value: object) -> Optional[str]:
    """Collapse whitespace; empty strings become None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        # bs4 returns multi-valued attributes (class, rel) as lists
        value = " ".join(str(v) for v in value)
    text = " ".join(str(value).split())
    return text or None


def node_text(node: Optional[Tag]) -> Optional[str]:
    if node is None:
        return None
    return clean_text(node.get_text(" "))


def select_text(soup: BeautifulSoup, selectors: Iterable[str]) -> Optional[str]:
    """Text of the first selector whose first match is non-empty."""
    for css in selectors:
        text = node_text(soup.select_one(css))
        if text:
            return text
    return None


def select_attr(soup: BeautifulSoup, candidates: Iterable[Tuple[str, Sequence[str]]]) -> Optional[str]:
    """
    For each (selector, attributes) pair, try the attributes of the first match
    in order and return the first non-empty value.
    """
    for css, attrs in candidates:
        node = soup.select_one(css)
        if node is None:
            continue
        for attr in attrs:
            value = clean_text(node.get(attr))
            if value:
                return value
    return None


def meta_content(soup: BeautifulSoup, key: str) -> Optional[str]:
    """
    Content of ``<meta property=key>`` or, failing that, ``<meta name=key>``.
    """
    for attr in ("property", "name"):
        node = soup.find("meta", attrs={attr: key})
        if node is not None:
            value = clean_text(node.get("content"))
            if value:
                return value
    return None


def link_href(soup: BeautifulSoup, rel: str) -> Optional[str]:
    for node in soup.find_all("link", href=True):
        rels = node.get("rel") or []
        if isinstance(rels, str):
            rels = rels.split()
        if rel in (r.lower() for r in rels):
            return clean_text(node.get("href"))
    return None
