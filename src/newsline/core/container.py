#!/usr/bin/env python3
"""
Dependency Injection Container

Composes the object graph once at process start. A container is built
explicitly with build_container() and handed to whoever needs it; there is
no module-level instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict

from .config import ApplicationConfig
from .repository import NewsRepository
from .sources.newsapi import NewsApiDataSource
from ..integrations.newsapi_client import NewsApiClient

logger = logging.getLogger(__name__)


class Container:
    """Registry of named instances and per-call factories."""

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register_factory(self, service_name: str, factory: Callable[[], Any]) -> None:
        """Register a factory called on every get()."""
        self._instances.pop(service_name, None)
        self._factories[service_name] = factory

    def register_instance(self, service_name: str, instance: Any) -> None:
        """Register a pre-built instance returned by every get()."""
        self._factories.pop(service_name, None)
        self._instances[service_name] = instance

    def get(self, service_name: str) -> Any:
        """
        Get service by name.

        Raises:
            KeyError: If service is not registered
        """
        if service_name in self._instances:
            return self._instances[service_name]

        if service_name not in self._factories:
            raise KeyError(f"Service '{service_name}' not registered")

        logger.debug(f"Creating new instance for '{service_name}'")
        return self._factories[service_name]()


def build_container(config: ApplicationConfig) -> Container:
    """
    Build a container wired from configuration.

    Services:
        config: the ApplicationConfig instance
        api_client: new NewsApiClient per get(), to be used with ``async with``
        data_source_factory: callable(client) -> NewsDataSource
        repository_factory: callable(data_source) -> NewsRepository
    """
    container = Container()

    def create_api_client() -> NewsApiClient:
        return NewsApiClient(
            api_key=config.api_key,
            base_url=config.base_url,
            read_timeout=config.read_timeout_seconds,
            user_agent=config.user_agent
        )

    container.register_instance('config', config)
    container.register_factory('api_client', create_api_client)
    container.register_instance('data_source_factory', NewsApiDataSource)
    container.register_instance('repository_factory', NewsRepository)

    logger.debug("Default services registered in container")
    return container


@asynccontextmanager
async def open_repository(container: Container) -> AsyncIterator[NewsRepository]:
    """
    Open an API client and yield a repository bound to it.

    The client session is closed when the block exits.
    """
    async with container.get('api_client') as client:
        data_source = container.get('data_source_factory')(client)
        yield container.get('repository_factory')(data_source)
