"""External service integrations."""

from .newsapi_client import ApiResponse, NewsApiClient

__all__ = ['ApiResponse', 'NewsApiClient']
