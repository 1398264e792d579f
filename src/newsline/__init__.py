"""
newsline

Async client for the News API that exposes top headlines and keyword search
as emission sequences of request lifecycle states.

Example
-------
import asyncio

from newsline import NewsApiClient, NewsApiDataSource, NewsRepository

async def show():
    async with NewsApiClient(api_key="...") as client:
        repository = NewsRepository(NewsApiDataSource(client))
        async for state in repository.get_headlines("us"):
            print(state.kind, state)

asyncio.run(show())
"""

from .core.models import Article, Error, Loading, NewsResponse, NoneState, ResultState, Source, StateKind, Success
from .core.repository import NewsRepository
from .core.sources import NewsApiDataSource, NewsDataSource
from .integrations import ApiResponse, NewsApiClient

__version__ = "1.0.0"

__all__ = [
    "Article", "NewsResponse", "Source",
    "ResultState", "StateKind", "NoneState", "Loading", "Success", "Error",
    "NewsRepository", "NewsDataSource", "NewsApiDataSource",
    "ApiResponse", "NewsApiClient",
]
