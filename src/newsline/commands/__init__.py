#!/usr/bin/env python3
"""
Command endpoints for the news client.

Each top-level CLI command is handled by a dedicated command class.
"""

from typing import Dict, Type

from .base import BaseCommand
from .health import HealthCommand
from .news import NewsCommand
from ..core.container import Container

# Command registry for easy extension
COMMANDS: Dict[str, Type[BaseCommand]] = {
    'news': NewsCommand,
    'health': HealthCommand,
}


def get_command(command_name: str, container: Container) -> BaseCommand:
    """Get a command instance by name."""
    if command_name not in COMMANDS:
        available = ', '.join(COMMANDS.keys())
        raise ValueError(f"Unknown command '{command_name}'. Available: {available}")

    command_class = COMMANDS[command_name]
    return command_class(container)


def list_commands() -> Dict[str, str]:
    """Get list of available commands with descriptions."""
    return {
        name: (command_class.__doc__ or 'No description available').strip()
        for name, command_class in COMMANDS.items()
    }
