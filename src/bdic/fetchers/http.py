# src/bdic/fetchers/http.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import aiohttp
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


@dataclass
class HttpResponse:
    url: str
    status: int
    text: str
    reason: str = ""
    content_type: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpFetcher:
    """
    Small wrapper around aiohttp.
    - Handles timeouts
    - Retries on transient network errors (never on HTTP error statuses,
      those come back as a response for the caller to describe)
    - One session per lookup run
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 15,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
        }
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpFetcher":
        self._session = aiohttp.ClientSession(timeout=self._timeout, headers=self._headers)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    def _require_session(self) -> aiohttp.ClientSession:
        if not self._session:
            raise RuntimeError("HttpFetcher session not started. Use: `async with HttpFetcher() as f:`")
        return self._session

    @retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.6, min=0.6, max=6),
        retry=retry_if_exception_type((aiohttp.ClientError, asyncio.TimeoutError)),
    )
    async def fetch_text(self, url: str) -> HttpResponse:
        """Fetch URL and return the raw body, whatever the status."""
        session = self._require_session()

        logger.debug("HTTP GET %s", url)
        async with session.get(url, allow_redirects=True) as resp:
            text = await resp.text(errors="ignore")
            logger.debug("HTTP %d %s (%d chars)", resp.status, resp.url, len(text))
            return HttpResponse(
                url=str(resp.url),
                status=resp.status,
                text=text,
                reason=resp.reason or "",
                content_type=resp.headers.get("Content-Type"),
            )
