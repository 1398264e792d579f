#!/usr/bin/env python3
"""
News API response models.

Mirrors the JSON returned by the top-headlines and everything endpoints.
Every article field is optional because third-party data is frequently partial.
"""

from datetime import datetime
from typing import Dict, Any, Optional, Tuple
from dataclasses import dataclass, field

from dateutil import parser as date_parser

from ..exceptions import ValidationError


def _parse_datetime_safe(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _require_mapping(name: str, value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(name, value, "JSON object")
    return value


@dataclass(frozen=True)
class Source:
    """Publisher an article belongs to."""
    id: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Source':
        data = _require_mapping('source', data)
        return cls(id=data.get('id'), name=data.get('name'))


@dataclass(frozen=True)
class Article:
    """A single article as returned by the news API."""
    author: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[str] = None
    source: Optional[Source] = None
    title: Optional[str] = None
    url: Optional[str] = None
    url_to_image: Optional[str] = None

    @property
    def published(self) -> Optional[datetime]:
        """Publication time parsed from ``published_at``, if it parses."""
        return _parse_datetime_safe(self.published_at)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire (camelCase) representation."""
        return {
            'author': self.author,
            'content': self.content,
            'description': self.description,
            'publishedAt': self.published_at,
            'source': self.source.to_dict() if self.source else None,
            'title': self.title,
            'url': self.url,
            'urlToImage': self.url_to_image
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Article':
        """Create Article from a decoded JSON object."""
        data = _require_mapping('article', data)
        source = data.get('source')
        return cls(
            author=data.get('author'),
            content=data.get('content'),
            description=data.get('description'),
            published_at=data.get('publishedAt'),
            source=Source.from_dict(source) if source is not None else None,
            title=data.get('title'),
            url=data.get('url'),
            url_to_image=data.get('urlToImage')
        )

    def __repr__(self):
        title = (self.title or '')[:50]
        source_name = self.source.name if self.source else None
        return f"Article(title='{title}', source='{source_name}')"


@dataclass(frozen=True)
class NewsResponse:
    """
    Immutable body of a news API response.

    Constructed once per successful deserialization; ``articles`` keeps the
    order the API returned them in.
    """
    articles: Tuple[Article, ...] = field(default_factory=tuple)
    status: str = ""
    message: Optional[str] = None
    total_results: int = 0

    def __post_init__(self):
        # Accept any iterable of articles but store it immutably.
        object.__setattr__(self, 'articles', tuple(self.articles))

    @property
    def is_ok(self) -> bool:
        return self.status == 'ok'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire (camelCase) representation."""
        return {
            'articles': [article.to_dict() for article in self.articles],
            'status': self.status,
            'message': self.message,
            'totalResults': self.total_results
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'NewsResponse':
        """
        Create NewsResponse from a decoded JSON document.

        Missing fields fall back to defaults; a document of the wrong shape
        raises ValidationError.

        Args:
            data: Decoded JSON value

        Returns:
            NewsResponse instance

        Raises:
            ValidationError: If the document is not an object, ``articles`` is
                not a list, or ``totalResults`` is not an integer
        """
        data = _require_mapping('response', data)

        raw_articles = data.get('articles')
        if raw_articles is None:
            raw_articles = []
        if not isinstance(raw_articles, list):
            raise ValidationError('articles', raw_articles, "JSON array")

        total_results = data.get('totalResults')
        if total_results is None:
            total_results = 0
        if isinstance(total_results, bool) or not isinstance(total_results, int):
            raise ValidationError('totalResults', total_results, "integer")

        return cls(
            articles=tuple(Article.from_dict(item) for item in raw_articles),
            status=data.get('status') or '',
            message=data.get('message'),
            total_results=total_results
        )
