#!/usr/bin/env python3
"""
News repository.

Turns data source calls into emission sequences of ResultState values.

Every sequence is an async generator that:

1. yields Loading before any work is done,
2. awaits exactly one data source call,
3. yields one terminal state and stops.

A 2xx response with a body becomes Success(body). Any other response becomes
Error(error=body), where body may be None. A fault raised by the data source
becomes Error(exception=fault) and is never re-raised to the consumer. This
includes a CancelledError raised by the call itself; only cancellation of the
consuming task propagates.

Sequences are cold: nothing is requested until the consumer starts iterating,
and calling an operation again starts a fresh request.
"""

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, List

from .config import DEFAULT_COUNTRY
from .models.news import NewsResponse
from .models.result_state import Error, Loading, ResultState, Success
from .sources.base import NewsDataSource
from ..integrations.newsapi_client import ApiResponse

logger = logging.getLogger(__name__)

NewsStates = AsyncIterator[ResultState[NewsResponse]]


class NewsRepository:
    """Exposes headline and search requests as emission sequences."""

    def __init__(self, data_source: NewsDataSource):
        """
        Initialize repository.

        Args:
            data_source: Seam over the transport used for every request
        """
        self.data_source = data_source

    def get_headlines(self, country: str = DEFAULT_COUNTRY) -> NewsStates:
        """
        Emission sequence for the top headlines of a country.

        Args:
            country: Two letter country code

        Returns:
            Async iterator yielding Loading followed by Success or Error
        """
        return self._emit(
            f"headlines country={country}",
            lambda: self.data_source.get_headlines(country=country)
        )

    def search_articles(self, query: str) -> NewsStates:
        """
        Emission sequence for a title keyword search.

        Args:
            query: Search keywords

        Returns:
            Async iterator yielding Loading followed by Success or Error
        """
        return self._emit(
            f"search query={query!r}",
            lambda: self.data_source.search_articles(query=query)
        )

    async def _emit(self, operation: str,
                    call: Callable[[], Awaitable[ApiResponse]]) -> NewsStates:
        yield Loading()

        try:
            response = await call()
        except asyncio.CancelledError as e:
            if asyncio.current_task().cancelling():
                raise
            # raised by the call itself while the consumer is still running
            logger.warning(f"{operation} was cancelled by the data source: {e!r}")
            yield Error(exception=e)
            return
        except Exception as e:
            logger.warning(f"{operation} raised {type(e).__name__}: {e}")
            yield Error(exception=e)
            return

        if response.is_successful and response.body is not None:
            logger.info(f"{operation} succeeded with {len(response.body.articles)} articles")
            yield Success(response.body)
        else:
            logger.warning(f"{operation} failed with HTTP {response.status} "
                           f"({'with' if response.body is not None else 'without'} body)")
            yield Error(error=response.body)


async def collect(states: AsyncIterator[ResultState]) -> List[ResultState]:
    """Drain an emission sequence into a list."""
    return [state async for state in states]
