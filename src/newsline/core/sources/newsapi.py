#!/usr/bin/env python3
"""
News API backed data source.
"""

from ..config import DEFAULT_COUNTRY
from .base import NewsDataSource
from ...integrations.newsapi_client import ApiResponse, NewsApiClient


class NewsApiDataSource(NewsDataSource):
    """Pass-through to NewsApiClient; parameters are forwarded unchanged."""

    def __init__(self, client: NewsApiClient):
        self.client = client

    async def get_headlines(self, country: str = DEFAULT_COUNTRY) -> ApiResponse:
        return await self.client.fetch_headlines(country=country)

    async def search_articles(self, query: str) -> ApiResponse:
        return await self.client.search_articles(query=query)
