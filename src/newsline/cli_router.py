#!/usr/bin/env python3
"""
CLI Router for the news client.

Builds configuration and the dependency container once, then dispatches to
the command classes.
"""

import argparse
import logging
import sys
from typing import Optional, List

from .commands import COMMANDS, get_command
from .core.config import ConfigManager, DEFAULT_COUNTRY, LOG_FORMAT, configure_logging
from .core.container import Container, build_container

logger = logging.getLogger(__name__)


class CLIRouter:
    """
    CLI router for news client commands.

    Command structure:
    - python run.py news headlines --country us
    - python run.py news search bitcoin --json
    - python run.py health check
    """

    def __init__(self, container: Container):
        """
        Initialize CLI router.

        Args:
            container: Container shared by all commands
        """
        self.container = container
        self._command_parsers = {}
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            description="News API headlines and search client",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_examples_text()
        )

        subparsers = parser.add_subparsers(
            dest='command',
            help='Available commands',
            metavar='{command}'
        )

        self._add_news_parser(subparsers)
        self._add_health_parser(subparsers)

        return parser

    def _add_news_parser(self, subparsers):
        """Add news command parser."""
        news_parser = subparsers.add_parser(
            'news',
            help='Top headlines and article search'
        )
        self._command_parsers['news'] = news_parser

        news_subparsers = news_parser.add_subparsers(
            dest='subcommand',
            help='News operations',
            metavar='{headlines,search}'
        )

        headlines_parser = news_subparsers.add_parser('headlines', help='Show top headlines for a country')
        headlines_parser.add_argument('--country', default=None, help=f'Two letter country code (default: {DEFAULT_COUNTRY})')
        headlines_parser.add_argument('--json', action='store_true', help='Print each state as a JSON line')
        headlines_parser.add_argument('--verbose', action='store_true', help='Verbose output')

        search_parser = news_subparsers.add_parser('search', help='Search articles by title keywords')
        search_parser.add_argument('query', help='Keywords matched against article titles')
        search_parser.add_argument('--json', action='store_true', help='Print each state as a JSON line')
        search_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    def _add_health_parser(self, subparsers):
        """Add health command parser."""
        health_parser = subparsers.add_parser(
            'health',
            help='Configuration diagnostics'
        )
        self._command_parsers['health'] = health_parser

        health_subparsers = health_parser.add_subparsers(
            dest='subcommand',
            help='Health operations',
            metavar='{check}'
        )

        health_subparsers.add_parser('check', help='Show configuration status')

    def _get_examples_text(self) -> str:
        """Get examples text for help."""
        return """
Examples:
  python run.py news headlines
  python run.py news headlines --country fr --verbose
  python run.py news search bitcoin
  python run.py news search "climate summit" --json
  python run.py health check
"""

    def route_command(self, args: Optional[List[str]] = None) -> int:
        """
        Route command to appropriate handler.

        Args:
            args: Command line arguments (uses sys.argv if None)

        Returns:
            Exit code
        """
        try:
            if args is None:
                args = sys.argv[1:]

            parsed_args = self.parser.parse_args(args)

            if not parsed_args.command:
                self.parser.print_help()
                return 1

            return self._handle_command(parsed_args)

        except SystemExit as e:
            # argparse calls sys.exit() on error or help
            return e.code if e.code is not None else 0

    def _handle_command(self, args: argparse.Namespace) -> int:
        """Handle command structure."""
        logger.debug(f"Handling command: {args.command}")

        subcommand = getattr(args, 'subcommand', None)
        if not subcommand:
            logger.error(f"No subcommand specified for '{args.command}'")
            self._command_parsers[args.command].print_help()
            return 1

        if getattr(args, 'verbose', False):
            configure_logging(self.container.get('config'), verbose=True)

        command = get_command(args.command, self.container)
        return command.execute(subcommand, args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        config_manager = ConfigManager()
        config_manager.update_logging()
        container = build_container(config_manager.get_config())
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        return 22

    router = CLIRouter(container)
    return router.route_command(args)


if __name__ == '__main__':
    sys.exit(main())
