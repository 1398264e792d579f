#!/usr/bin/env python3
"""
Health check command.

Reports whether the client is configured well enough to talk to the API.
"""

import logging
from argparse import Namespace

from .base import BaseCommand
from ..core.config import API_KEY_ENV

logger = logging.getLogger(__name__)


class HealthCommand(BaseCommand):
    """Configuration diagnostics."""

    def execute(self, subcommand: str, args: Namespace) -> int:
        """Execute health subcommand."""
        try:
            if subcommand == "check":
                return self.check(args)
            else:
                available = ", ".join(self.get_available_subcommands())
                self.logger.error(f"Unknown subcommand '{subcommand}'. Available: {available}")
                return 1

        except Exception as e:
            return self.handle_error(e, f"health {subcommand}")

    def check(self, args: Namespace) -> int:
        """Print configuration status."""
        config = self.config
        healthy = True

        print("System Health Check")
        print("=" * 50)
        print(f"  Base URL:      {config.base_url}")
        print(f"  Read timeout:  {config.read_timeout_seconds}s")
        print(f"  Log level:     {config.log_level}")

        if config.has_api_key():
            print("  API key:       OK")
        else:
            print(f"  API key:       MISSING (set {API_KEY_ENV})")
            healthy = False

        print("=" * 50)
        print("Healthy" if healthy else "Unhealthy")
        return 0 if healthy else 1
