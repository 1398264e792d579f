import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from newsline.core.models.news import Article, NewsResponse, Source  # noqa: E402
from newsline.core.sources.base import NewsDataSource  # noqa: E402
from newsline.integrations.newsapi_client import ApiResponse  # noqa: E402

Outcome = Union[ApiResponse, BaseException]


class FakeDataSource(NewsDataSource):
    """Data source returning (or raising) scripted outcomes."""

    def __init__(self, outcome: Optional[Outcome] = None, block: bool = False) -> None:
        self.outcome = outcome if outcome is not None else ApiResponse(status=200, body=None)
        self.block = block
        self.calls: List[Dict[str, Any]] = []
        self.cancelled = False
        self.started = asyncio.Event() if block else None

    async def _respond(self) -> ApiResponse:
        if self.block:
            self.started.set()
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    async def get_headlines(self, country: str = "us") -> ApiResponse:
        self.calls.append({"operation": "headlines", "country": country})
        return await self._respond()

    async def search_articles(self, query: str) -> ApiResponse:
        self.calls.append({"operation": "search", "query": query})
        return await self._respond()


@pytest.fixture
def sample_response() -> NewsResponse:
    return NewsResponse(
        articles=[
            Article(
                author="Jane Doe",
                title="Markets rally on rate decision",
                url="https://example.com/markets",
                published_at="2024-05-01T12:30:00Z",
                source=Source(id="example", name="Example News"),
            ),
            Article(title="Storm heads north", url="https://example.com/storm"),
        ],
        status="ok",
        total_results=2,
    )


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {
                "source": {"id": "example", "name": "Example News"},
                "author": "Jane Doe",
                "title": "Markets rally on rate decision",
                "description": "Stocks climbed after the announcement.",
                "url": "https://example.com/markets",
                "urlToImage": "https://example.com/markets.jpg",
                "publishedAt": "2024-05-01T12:30:00Z",
                "content": "Stocks climbed...",
            },
            {
                "source": {"id": None, "name": "Wire"},
                "author": None,
                "title": "Storm heads north",
                "description": None,
                "url": "https://example.com/storm",
                "urlToImage": None,
                "publishedAt": None,
                "content": None,
            },
        ],
    }


@pytest.fixture
def fake_data_source_factory():
    def _factory(outcome: Optional[Outcome] = None, block: bool = False) -> FakeDataSource:
        return FakeDataSource(outcome, block=block)

    return _factory
