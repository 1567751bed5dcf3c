"""Command registry - discovery and resolution of pluggable commands.

Commands come from two sources, searched in this order:
- explicit registrations (`CommandRegistry.register`)
- modules found under each namespace package, in namespace order

A module provides a command when its `Extension` attribute is a subclass of
`plugcli.commands.interface.Command`. The first source providing a given
short name wins.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import re
from collections.abc import Iterable, Iterator

from .commands.interface import Command
from .constants import DEFAULT_NAMESPACES
from .logging_setup import get_logger
from .models import CommandDescriptor, CommandLoadError

__all__ = ["CommandRegistry", "is_command_name", "load_command", "make_descriptor"]

_NAME_PATTERN = re.compile(r"\w+")


def is_command_name(name: str | None) -> bool:
    """Return True if `name` is made of word characters only."""
    return bool(name) and _NAME_PATTERN.fullmatch(name) is not None


def _is_missing(error: ModuleNotFoundError, module_name: str) -> bool:
    """Tell whether `error` means `module_name` (or one of its parents) does not exist.

    A missing dependency imported *by* the module is a load failure instead.
    """
    if not error.name:
        return False
    return module_name == error.name or module_name.startswith(f"{error.name}.")


def load_command(module_name: str, fatal: bool = False) -> type[Command] | None:
    """Import `module_name` and return its command class.

    Args:
        module_name: Fully qualified module name
        fatal: Raise `CommandLoadError` when the module exists but fails to load

    Returns:
        The `Extension` class, or None when the module does not exist, is not
        a command, or failed to load in non-fatal mode
    """
    log = get_logger("registry")
    try:
        module = importlib.import_module(module_name)
    except Exception as e:  # pylint: disable=W0718
        if isinstance(e, ModuleNotFoundError) and _is_missing(e, module_name):
            return None
        if fatal:
            log.exception("Error loading command %s:", module_name)
            raise CommandLoadError(module_name) from e
        log.debug("Skipping %s: %s", module_name, e)
        return None

    extension = getattr(module, "Extension", None)
    if inspect.isclass(extension) and issubclass(extension, Command):
        return extension
    return None


def make_descriptor(name: str, qualified_name: str, factory: type[Command]) -> CommandDescriptor:
    """Build the descriptor of a command class."""
    return CommandDescriptor(
        name=name,
        qualified_name=qualified_name,
        description=factory.get_description(),
        usage=factory.get_usage(),
        factory=factory,
        args=tuple(factory.get_args()),
    )


class CommandRegistry:
    """Finds commands under an ordered list of namespaces."""

    def __init__(self, namespaces: Iterable[str] | None = None) -> None:
        self.namespaces: list[str] = list(DEFAULT_NAMESPACES if namespaces is None else namespaces)
        self._registered: dict[str, type[Command]] = {}
        self.log = get_logger("registry")

    def register(self, name: str, factory: type[Command]) -> None:
        """Register `factory` as the command `name`, ahead of any namespace."""
        if not is_command_name(name):
            raise ValueError(f"Invalid command name: {name!r}")
        if not (inspect.isclass(factory) and issubclass(factory, Command)):
            raise TypeError(f"{factory!r} is not a Command subclass")
        self._registered[name] = factory

    def _search(self, namespace: str) -> Iterator[str]:
        """Yield the names of the modules directly under `namespace`."""
        try:
            package = importlib.import_module(namespace)
        except Exception as e:  # pylint: disable=W0718
            self.log.debug("Skipping namespace %s: %s", namespace, e)
            return
        path = getattr(package, "__path__", None)
        if path is None:
            return
        for module_info in pkgutil.iter_modules(path, prefix=f"{namespace}."):
            yield module_info.name

    def discover(self, namespaces: Iterable[str] | None = None) -> list[CommandDescriptor]:
        """Find every available command, skipping the ones failing to load.

        Args:
            namespaces: Namespaces to search, defaults to `self.namespaces`

        Returns:
            Descriptors in discovery order, one per short name
        """
        commands: list[CommandDescriptor] = []
        seen: set[str] = set()

        for name, factory in self._registered.items():
            seen.add(name)
            commands.append(make_descriptor(name, f"{factory.__module__}.{factory.__qualname__}", factory))

        for namespace in self.namespaces if namespaces is None else namespaces:
            for module_name in sorted(self._search(namespace)):
                factory = load_command(module_name)
                if factory is None:
                    continue
                name = module_name[len(namespace) + 1 :]
                if name in seen:
                    continue
                seen.add(name)
                commands.append(make_descriptor(name, module_name, factory))

        return commands

    def resolve(self, name: str, namespaces: Iterable[str] | None = None) -> CommandDescriptor | None:
        """Find the command called `name`.

        Raises `CommandLoadError` if the matching module is broken.

        Args:
            name: Short command name
            namespaces: Namespaces to search, defaults to `self.namespaces`

        Returns:
            The first matching descriptor, or None
        """
        if not is_command_name(name):
            return None

        if name in self._registered:
            factory = self._registered[name]
            return make_descriptor(name, f"{factory.__module__}.{factory.__qualname__}", factory)

        for namespace in self.namespaces if namespaces is None else namespaces:
            module_name = f"{namespace}.{name}"
            factory = load_command(module_name, fatal=True)
            if factory is not None:
                self.log.debug("Resolved %s to %s", name, module_name)
                return make_descriptor(name, module_name, factory)

        return None
