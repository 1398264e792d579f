#!/usr/bin/env python3
"""
Centralized Configuration Manager

Holds the fixed wire configuration of the news API and the small set of
settings read from the environment (credential and logging).
"""

import logging
from dataclasses import dataclass
from typing import Optional, Dict

from .env_loader import get_env_var, load_env_file
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Fixed wire configuration, not read from the environment
BASE_URL = "https://newsapi.org"
HEADLINES_PATH = "/v2/top-headlines"
SEARCH_PATH = "/v2/everything"
READ_TIMEOUT_SECONDS = 60
CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_COUNTRY = "us"
DEFAULT_SORT_BY = "popularity"
DEFAULT_USER_AGENT = "newsline/1.0"

API_KEY_ENV = "NEWS_API_KEY"

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


@dataclass(frozen=True)
class ApplicationConfig:
    """Core application configuration."""
    api_key: str = ""
    base_url: str = BASE_URL
    read_timeout_seconds: float = READ_TIMEOUT_SECONDS
    default_country: str = DEFAULT_COUNTRY
    default_sort_by: str = DEFAULT_SORT_BY
    user_agent: str = DEFAULT_USER_AGENT

    # Logging
    log_level: str = "INFO"
    verbose_logging: bool = False

    def has_api_key(self) -> bool:
        """Check if a News API key is configured."""
        return bool(self.api_key)


class ConfigManager:
    """Manages application configuration with validation and environment loading."""

    def __init__(self, env_file_path: Optional[str] = ".env"):
        """
        Initialize configuration manager.

        Args:
            env_file_path: Path to .env file relative to project root, or None
                to skip loading one
        """
        self._config: Optional[ApplicationConfig] = None
        if env_file_path:
            load_env_file(env_file_path)

    def get_config(self, force_reload: bool = False) -> ApplicationConfig:
        """
        Get application configuration.

        Args:
            force_reload: Force reloading configuration from environment

        Returns:
            Complete configuration object
        """
        if self._config is None or force_reload:
            self._config = self._build_config()
        return self._config

    def _build_config(self) -> ApplicationConfig:
        """Build configuration from environment variables."""
        config = ApplicationConfig(
            api_key=get_env_var(API_KEY_ENV, '').strip(),
            log_level=get_env_var('LOG_LEVEL', 'INFO').strip().upper(),
            verbose_logging=get_env_var('VERBOSE_LOGGING', 'false').strip().lower() == 'true'
        )

        validate_config(config)

        if not config.has_api_key():
            logger.warning(f"{API_KEY_ENV} is not set; requests will be rejected by the API")

        return config

    def update_logging(self) -> None:
        """Configure logging based on current configuration."""
        configure_logging(self.get_config())

    def get_integration_status(self) -> Dict[str, bool]:
        """Get status of configured integrations."""
        config = self.get_config()
        return {
            'news_api_key': config.has_api_key(),
        }


def validate_config(config: ApplicationConfig) -> None:
    """
    Validate configuration values.

    Raises:
        ConfigurationError: On the first invalid value
    """
    if not config.base_url.startswith(('http://', 'https://')):
        raise ConfigurationError('base_url', "must start with http:// or https://")

    if config.read_timeout_seconds <= 0:
        raise ConfigurationError('read_timeout_seconds', "must be positive")

    if config.log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError('LOG_LEVEL', f"must be one of: {', '.join(VALID_LOG_LEVELS)}")

    logger.debug("Configuration validation passed")


def configure_logging(config: ApplicationConfig, verbose: bool = False) -> None:
    """Apply level and format from configuration to the root logger."""
    verbose = verbose or config.verbose_logging
    numeric_level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    format_str = VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in root.handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S'))
