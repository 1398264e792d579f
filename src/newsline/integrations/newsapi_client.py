#!/usr/bin/env python3
"""
News API integration.

Async HTTP client for the newsapi.org top-headlines and everything endpoints.
Each operation issues exactly one GET request and returns the status code
together with the decoded body; non-2xx responses are returned, not raised.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from ..core.config import (
    BASE_URL,
    CONNECT_TIMEOUT_SECONDS,
    DEFAULT_COUNTRY,
    DEFAULT_SORT_BY,
    DEFAULT_USER_AGENT,
    HEADLINES_PATH,
    READ_TIMEOUT_SECONDS,
    SEARCH_PATH,
)
from ..core.exceptions import (
    PayloadParseError,
    TransportConnectionError,
    TransportTimeoutError,
    ValidationError,
)
from ..core.models.news import NewsResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    """Status code and optional decoded body of one API call."""
    status: int
    body: Optional[NewsResponse] = None

    @property
    def is_successful(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status < 300


class NewsApiClient:
    """Client for the News API with a fixed read timeout and no retries."""

    def __init__(self,
                 api_key: str,
                 base_url: str = BASE_URL,
                 read_timeout: float = READ_TIMEOUT_SECONDS,
                 user_agent: str = DEFAULT_USER_AGENT,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize News API client.

        Args:
            api_key: News API key sent as the ``apiKey`` query parameter
            base_url: Scheme and host of the API
            read_timeout: Socket read timeout in seconds
            user_agent: User-Agent header value
            session: Optional externally owned session; when given, the
                client does not close it
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.read_timeout = read_timeout
        self.user_agent = user_agent
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(sock_connect=CONNECT_TIMEOUT_SECONDS,
                                              sock_read=self.read_timeout),
                headers={'User-Agent': self.user_agent}
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def fetch_headlines(self, country: str = DEFAULT_COUNTRY) -> ApiResponse:
        """
        Fetch top headlines for a country.

        Args:
            country: Two letter country code

        Returns:
            ApiResponse with the status code and decoded body

        Raises:
            TransportConnectionError: If the API could not be reached
            TransportTimeoutError: If no response arrived within the read timeout
            PayloadParseError: If a 2xx body could not be decoded
        """
        params = {
            'country': country,
            'apiKey': self.api_key,
        }
        return await self._get(HEADLINES_PATH, params)

    async def search_articles(self, query: str, sort_by: str = DEFAULT_SORT_BY) -> ApiResponse:
        """
        Search articles whose title matches a query.

        Args:
            query: Keywords matched against article titles (``qInTitle``)
            sort_by: Sort order understood by the API

        Returns:
            ApiResponse with the status code and decoded body

        Raises:
            TransportConnectionError: If the API could not be reached
            TransportTimeoutError: If no response arrived within the read timeout
            PayloadParseError: If a 2xx body could not be decoded
        """
        params = {
            'sortBy': sort_by,
            'apiKey': self.api_key,
            'qInTitle': query,
        }
        return await self._get(SEARCH_PATH, params)

    async def _get(self, path: str, params: Dict[str, str]) -> ApiResponse:
        if self._session is None:
            raise RuntimeError("NewsApiClient must be used as async context manager")

        url = f"{self.base_url}{path}"
        logger.debug(f"--> GET {url} {self._redact(params)}")

        try:
            async with self._session.get(url, params=params) as response:
                status = response.status
                payload = await response.read()
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout fetching {url}")
            raise TransportTimeoutError(url, self.read_timeout) from e
        except aiohttp.ClientError as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            raise TransportConnectionError(url, e) from e

        logger.debug(f"<-- {status} {url} ({len(payload)} bytes)")
        if payload:
            logger.debug(payload[:2000].decode('utf-8', errors='replace'))

        body = self._decode_body(url, status, payload)
        return ApiResponse(status=status, body=body)

    def _decode_body(self, url: str, status: int, payload: bytes) -> Optional[NewsResponse]:
        """Decode a payload; only 2xx payloads raise on malformed content."""
        if not payload.strip():
            return None

        try:
            data: Any = json.loads(payload)
            return NewsResponse.from_dict(data)
        except (ValueError, ValidationError) as e:
            if 200 <= status < 300:
                raise PayloadParseError(url, e) from e
            logger.debug(f"Ignoring undecodable error body from {url} (HTTP {status}): {e}")
            return None

    @staticmethod
    def _redact(params: Dict[str, str]) -> Dict[str, str]:
        return {key: ('***' if key == 'apiKey' else value) for key, value in params.items()}
