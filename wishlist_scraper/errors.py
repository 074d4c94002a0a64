from __future__ import annotations

from typing import Optional


class ScrapeError(Exception):
    """Base class for every failure the scraping pipeline reports."""


class InvalidUrlError(ScrapeError, ValueError):
    """The input could not be turned into a well-formed http(s) URL."""

    def __init__(self, raw: str, reason: str = "not a well-formed URL") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid URL {raw!r}: {reason}")


class FetchError(ScrapeError):
    """
    The page could not be retrieved: DNS failure, refused connection,
    non-2xx status or timeout. ``cause`` keeps the underlying exception.
    """

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        detail = _describe(cause) if cause is not None else "unknown error"
        super().__init__(f"Failed to fetch {url}: {detail}")


class ExtractionError(ScrapeError):
    """An adapter raised while reading already-fetched markup."""

    def __init__(self, adapter: str, url: str, cause: Optional[BaseException] = None) -> None:
        self.adapter = adapter
        self.url = url
        self.cause = cause
        detail = _describe(cause) if cause is not None else "unknown error"
        super().__init__(f"Adapter {adapter!r} failed on {url}: {detail}")


def _describe(exc: BaseException) -> str:
    # asyncio.TimeoutError stringifies to "" which is useless in a diagnostic.
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
