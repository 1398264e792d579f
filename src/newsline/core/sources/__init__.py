#!/usr/bin/env python3
"""
News data sources.
"""

from .base import NewsDataSource
from .newsapi import NewsApiDataSource

__all__ = ['NewsDataSource', 'NewsApiDataSource']
