#!/usr/bin/env python3
"""
Presentation state holders for the headlines and search views.

Presenters collect repository emission sequences into a current ``state`` and
notify subscribers on every change. Rendering is left to the subscriber.
All methods must be called from within a running event loop.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .config import DEFAULT_COUNTRY
from .models.news import NewsResponse
from .models.result_state import Loading, NoneState, ResultState
from .repository import NewsRepository

logger = logging.getLogger(__name__)

StateListener = Callable[[ResultState[NewsResponse]], None]

SEARCH_DEBOUNCE_SECONDS = 0.35


class StatePresenter:
    """Holds the latest ResultState and fans it out to listeners."""

    def __init__(self, repository: NewsRepository, initial: ResultState[NewsResponse]):
        self.repository = repository
        self._state = initial
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ResultState[NewsResponse]:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: ResultState[NewsResponse]) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


class HeadlinesPresenter(StatePresenter):
    """State for the top headlines view, with a pull-to-refresh flag."""

    def __init__(self, repository: NewsRepository, country: str = DEFAULT_COUNTRY):
        super().__init__(repository, Loading())
        self.country = country
        self.is_refreshing = False

    async def refresh(self) -> ResultState[NewsResponse]:
        """
        Request headlines and publish every emitted state.

        Returns:
            The terminal state
        """
        async for state in self.repository.get_headlines(self.country):
            logger.debug(f"get_headlines state: {state}")
            if not isinstance(state, Loading):
                self.is_refreshing = False
            self._set_state(state)
        return self.state

    def set_refreshing(self, is_refreshing: bool) -> None:
        self.is_refreshing = is_refreshing


class SearchPresenter(StatePresenter):
    """
    State for the search view.

    Query changes are trimmed and debounced; a query equal to the last
    dispatched one is ignored. An empty query cancels the running search and
    resets the state to NoneState. Starting a new search cancels the previous
    one.
    """

    def __init__(self, repository: NewsRepository, debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS):
        super().__init__(repository, NoneState())
        self.debounce_seconds = debounce_seconds
        self.query = ""
        self._last_dispatched: Optional[str] = None
        self._debounce_task: Optional[asyncio.Task] = None
        self._search_task: Optional[asyncio.Task] = None

    def on_query_change(self, query: str) -> None:
        """Record the raw query text and schedule a debounced dispatch."""
        self.query = query
        if self._debounce_task is not None:
            self._debounce_task.cancel()
        self._debounce_task = asyncio.get_running_loop().create_task(
            self._debounced_dispatch(query.strip())
        )
        self._debounce_task.add_done_callback(_log_task_failure)

    def clear_query(self) -> None:
        self.on_query_change("")

    def search(self, query: str) -> asyncio.Task:
        """
        Cancel any running search and start a new one immediately.

        Returns:
            Task collecting the search emission sequence
        """
        self._cancel_search()
        self._search_task = asyncio.get_running_loop().create_task(self._run_search(query))
        self._search_task.add_done_callback(_log_task_failure)
        return self._search_task

    async def wait_idle(self) -> None:
        """Wait until no debounce or search task is pending."""
        while True:
            pending = [task for task in (self._debounce_task, self._search_task)
                       if task is not None and not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel pending work."""
        for task in (self._debounce_task, self._search_task):
            if task is not None and not task.done():
                task.cancel()
        await self.wait_idle()

    async def _debounced_dispatch(self, query: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if query == self._last_dispatched:
            return
        self._last_dispatched = query

        logger.debug(f"Query: {query!r}")
        if not query:
            self._cancel_search()
            self._set_state(NoneState())
        else:
            self.search(query)

    async def _run_search(self, query: str) -> None:
        async for state in self.repository.search_articles(query):
            self._set_state(state)

    def _cancel_search(self) -> None:
        if self._search_task is not None and not self._search_task.done():
            self._search_task.cancel()
        self._search_task = None


def _log_task_failure(task: asyncio.Task) -> None:
    if task.cancelled() or task.exception() is None:
        return
    logger.error(f"Presenter task {task.get_name()} failed: {task.exception()!r}",
                 exc_info=task.exception())
