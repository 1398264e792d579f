#!/usr/bin/env python3
"""
Base command class for the modular command architecture.

Provides common functionality and interface that all commands inherit.
Dependencies come from an explicitly built container.
"""

import logging
from abc import ABC, abstractmethod
from argparse import Namespace
from typing import List, Optional

from ..core.config import ApplicationConfig
from ..core.container import Container
from ..core.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """
    Base class for all command endpoints.

    Provides access to the container and uniform error handling.
    """

    def __init__(self, container: Container):
        """
        Initialize base command with dependency injection container.

        Args:
            container: Container built at process start
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self._container = container

    @property
    def config(self) -> ApplicationConfig:
        """Get configuration from container."""
        return self._container.get('config')

    @abstractmethod
    def execute(self, subcommand: str, args: Namespace) -> int:
        """
        Execute the command with given subcommand and arguments.

        Args:
            subcommand: The specific action to perform
            args: Parsed command line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        pass

    def get_available_subcommands(self) -> List[str]:
        """
        Get list of available subcommands for this command.

        Returns:
            List of subcommand names
        """
        methods = []
        for attr_name in dir(self):
            if attr_name.startswith('_') or attr_name in ('execute', 'get_available_subcommands',
                                                          'handle_error', 'validate_args', 'config', 'logger'):
                continue
            if callable(getattr(self, attr_name)):
                methods.append(attr_name)
        return methods

    def handle_error(self, error: BaseException, context: str = "") -> int:
        """
        Standard error handling for commands.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            Appropriate exit code
        """
        if isinstance(error, KeyboardInterrupt):
            self.logger.info("Command interrupted by user")
            return 130

        error_msg = f"{context}: {error}" if context else str(error)
        if isinstance(error, (ConfigurationError, ValidationError, ValueError)):
            self.logger.error(error_msg)
            return 22

        self.logger.error(error_msg, exc_info=True)
        return 1

    def validate_args(self, args: Namespace, required_args: Optional[List[str]] = None) -> bool:
        """
        Validate that required arguments are present.

        Args:
            args: Parsed arguments
            required_args: List of required argument names

        Returns:
            True if valid, False otherwise
        """
        if not required_args:
            return True

        missing = [name for name in required_args if getattr(args, name, None) is None]
        if missing:
            self.logger.error(f"Missing required arguments: {', '.join(missing)}")
            return False

        return True
