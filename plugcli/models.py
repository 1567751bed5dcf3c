"""Common types: command descriptors, invocations, errors and exit codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .commands.interface import Command

__all__ = [
    "CommandArg",
    "CommandDescriptor",
    "CommandLoadError",
    "ConfigError",
    "ExitCode",
    "Invocation",
    "PlugcliError",
    "UnknownCommandError",
]


class PlugcliError(Exception):
    """Base class for errors reported to the user by the entry point."""


class UnknownCommandError(PlugcliError):
    """No namespace provides the requested command."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown command "{name}", maybe you need to install it?')
        self.name = name


class CommandLoadError(PlugcliError):
    """The requested command module exists but could not be imported."""

    def __init__(self, module: str) -> None:
        super().__init__(f'Unable to load command module "{module}"')
        self.module = module


class ConfigError(PlugcliError):
    """Used for configuration errors which already triggered logging."""


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Unknown command
    LOAD_ERROR = 2  # Broken command module or configuration file
    COMMAND_ERROR = 3  # Unhandled failure inside a command


@dataclass(frozen=True)
class CommandArg:
    """A positional argument announced by a command's docstring."""

    value: str  # e.g., "bash|zsh|tcsh" or "name"
    required: bool  # True for <arg>, False for [arg]


@dataclass(frozen=True)
class CommandDescriptor:
    """A discovered command."""

    name: str  # short name, e.g. "version"
    qualified_name: str  # e.g. "plugcli.commands.version"
    description: str
    usage: str
    factory: type[Command] = field(compare=False, repr=False)
    args: tuple[CommandArg, ...] = field(default=(), compare=False)


@dataclass
class Invocation:
    """A single dispatch request."""

    name: str
    args: list[str] = field(default_factory=list)
    help: bool = False
