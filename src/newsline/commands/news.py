#!/usr/bin/env python3
"""
News command endpoints for top headlines and keyword search.

Each emission of the repository sequence is printed as it arrives.
"""

import asyncio
import logging
from argparse import Namespace
from typing import AsyncIterator, Callable, Optional

from .base import BaseCommand
from ..core.container import open_repository
from ..core.exceptions import ValidationError
from ..core.formatters import format_state, state_to_json
from ..core.models.result_state import ResultState, Success
from ..core.repository import NewsRepository

logger = logging.getLogger(__name__)

SequenceOpener = Callable[[NewsRepository], AsyncIterator[ResultState]]


class NewsCommand(BaseCommand):
    """Fetch top headlines or search articles from the News API."""

    def execute(self, subcommand: str, args: Namespace) -> int:
        """Execute news subcommand."""
        try:
            if subcommand == "headlines":
                return self.headlines(args)
            elif subcommand == "search":
                return self.search(args)
            else:
                available = ", ".join(self.get_available_subcommands())
                self.logger.error(f"Unknown subcommand '{subcommand}'. Available: {available}")
                return 1

        except (Exception, KeyboardInterrupt) as e:
            return self.handle_error(e, f"news {subcommand}")

    def headlines(self, args: Namespace) -> int:
        """Show top headlines for a country."""
        country = (getattr(args, 'country', None) or self.config.default_country).strip().lower()
        if len(country) != 2 or not country.isalpha():
            raise ValidationError('country', country, "two letter country code")

        return asyncio.run(self._render(
            lambda repository: repository.get_headlines(country),
            as_json=getattr(args, 'json', False)
        ))

    def search(self, args: Namespace) -> int:
        """Search articles by title keywords."""
        if not self.validate_args(args, ['query']):
            return 1

        query = args.query.strip()
        if not query:
            raise ValidationError('query', args.query, "non-empty search text")

        return asyncio.run(self._render(
            lambda repository: repository.search_articles(query),
            as_json=getattr(args, 'json', False)
        ))

    async def _render(self, open_sequence: SequenceOpener, as_json: bool = False) -> int:
        terminal: Optional[ResultState] = None
        async with open_repository(self._container) as repository:
            async for state in open_sequence(repository):
                print(state_to_json(state) if as_json else format_state(state))
                terminal = state

        return 0 if isinstance(terminal, Success) else 1
