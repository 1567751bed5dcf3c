"""Help listing of the available commands."""

from __future__ import annotations

from collections.abc import Iterable

from .models import CommandDescriptor
from .utils import tablify

__all__ = ["get_commands_help", "get_help"]


def get_commands_help(commands: Iterable[CommandDescriptor]) -> list[tuple[str, str]]:
    """Get the available commands and their short description, sorted by name.

    Args:
        commands: Discovered command descriptors

    Returns:
        List of (name, description) tuples
    """
    return [(command.name, command.description) for command in sorted(commands, key=lambda c: c.name)]


def get_help(commands: Iterable[CommandDescriptor], message: str = "", hint: str = "") -> str:
    """Get the help listing for all commands.

    Args:
        commands: Discovered command descriptors
        message: Text shown before the table
        hint: Text shown after the table
    """
    rows = [[f" {name}", description] for name, description in get_commands_help(commands)]
    return message + tablify(rows) + hint
