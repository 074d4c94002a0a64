from __future__ import annotations

import asyncio
from typing import Optional
from aiohttp import ClientSession, ClientTimeout
import aiohttp
import logging

from ..config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT
from ..errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Single-attempt HTML fetcher. Timeout and user agent are injected so tests
    (and callers) can swap them; there are no retries and no cookie jar.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[ClientSession] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._session = session

    async def fetch(self, url: str) -> str:
        """
        GET ``url`` and return the body text. Raises FetchError on DNS or
        connection failures, non-2xx statuses and timeouts.
        """
        if self._session is not None:
            return await self._get(self._session, url)
        # No shared state between invocations: each call owns its session.
        async with create_session() as session:
            return await self._get(session, url)

    async def _get(self, session: ClientSession, url: str) -> str:
        headers = {"User-Agent": self.user_agent}
        logger.debug("GET %s (timeout=%ss)", url, self.timeout)
        try:
            async with session.get(url, headers=headers, timeout=ClientTimeout(total=self.timeout)) as resp:
                # raise_for_status() lets unfollowed 3xx responses through.
                if not 200 <= resp.status < 300:
                    raise aiohttp.ClientResponseError(
                        resp.request_info,
                        resp.history,
                        status=resp.status,
                        message=resp.reason or "",
                        headers=resp.headers,
                    )
                return await resp.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("fetch failed for %s: %r", url, exc)
            raise FetchError(url, exc) from exc


def create_session() -> ClientSession:
    """
    Create an aiohttp ClientSession without a persistent cookie jar.
    """
    # Note: caller is responsible for closing the session (await session.close()).
    return aiohttp.ClientSession(cookie_jar=aiohttp.DummyCookieJar())
