#!/usr/bin/env python3
"""
Base class for news data sources.

The repository depends only on this interface, so the concrete transport can
be swapped for a fake in tests.
"""

from abc import ABC, abstractmethod

from ..config import DEFAULT_COUNTRY
from ...integrations.newsapi_client import ApiResponse


class NewsDataSource(ABC):
    """
    Abstract seam between the repository and the transport.

    Implementations return the raw status/body pair and must not raise on a
    non-2xx status; failed responses surface as data. Network and payload
    faults propagate as exceptions.
    """

    @abstractmethod
    async def get_headlines(self, country: str = DEFAULT_COUNTRY) -> ApiResponse:
        """
        Fetch top headlines for a country.

        Args:
            country: Two letter country code

        Returns:
            Raw ApiResponse from the transport
        """
        pass

    @abstractmethod
    async def search_articles(self, query: str) -> ApiResponse:
        """
        Search articles by title keywords.

        Args:
            query: Search keywords

        Returns:
            Raw ApiResponse from the transport
        """
        pass
