#!/usr/bin/env python3
"""
Formatting utilities for news display.
"""

import json
from typing import List

from .models.news import Article, NewsResponse
from .models.result_state import Error, ResultState, StateKind, Success


def format_article(article: Article) -> str:
    """Format a single article for display."""
    timestamp = ""
    published = article.published
    if published:
        timestamp = published.strftime("%Y-%m-%d %H:%M")

    source = article.source.name if article.source and article.source.name else "unknown"
    title = article.title or "(untitled)"
    lines = [f"[{timestamp}] [{source.upper()}] {title}"]
    if article.url:
        lines.append(f"    {article.url}")
    return "\n".join(lines) + "\n"


def format_response(response: NewsResponse) -> str:
    """Format a full response as a header plus one block per article."""
    header = f"{len(response.articles)} of {response.total_results} articles (status: {response.status})"
    blocks: List[str] = [header, "=" * len(header)]
    blocks.extend(format_article(article) for article in response.articles)
    return "\n".join(blocks)


def format_state(state: ResultState) -> str:
    """One line (or block, for Success) per emitted state."""
    if isinstance(state, Success):
        return format_response(state.data)
    if isinstance(state, Error):
        return f"Error: {state.describe()}"
    if state.kind is StateKind.LOADING:
        return "Loading..."
    return "No request made"


def state_to_json(state: ResultState) -> str:
    """Serialize a state for machine consumption."""
    payload = {'state': state.kind.value}
    if isinstance(state, Success):
        payload['data'] = state.data.to_dict()
    elif isinstance(state, Error):
        payload['error'] = state.error.to_dict() if state.error is not None else None
        payload['exception'] = (
            {'type': type(state.exception).__name__, 'message': str(state.exception)}
            if state.exception is not None else None
        )
    return json.dumps(payload, ensure_ascii=False)
