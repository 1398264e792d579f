#!/usr/bin/env python3
"""
Core data models for the news client.

Contains the API response models and the request lifecycle states.
"""

from .news import Article, NewsResponse, Source
from .result_state import Error, Loading, NoneState, ResultState, StateKind, Success

__all__ = [
    'Article', 'NewsResponse', 'Source',
    'ResultState', 'StateKind', 'NoneState', 'Loading', 'Success', 'Error',
]
