"""Command line interface: dispatch to a command or list them all.

Usage: APPLICATION COMMAND [OPTIONS]

Tip: CGI and PSGI environments can be automatically detected very often and
     work without commands.

Options (for all commands):
  -h, --help          Get more information on a specific command.
      --home <path>   Path to your applications home directory, defaults to
                      the value of PLUGCLI_HOME or auto detection.
  -m, --mode <name>   Operating mode for your application, defaults to the
                      value of PLUGCLI_MODE/PSGI_ENV or "development".
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .command_registry import CommandRegistry, is_command_name
from .commands.parsing import extract_usage
from .detect import detect
from .help import get_help
from .logging_setup import get_logger
from .models import ExitCode, Invocation, UnknownCommandError
from .settings import Settings

if TYPE_CHECKING:
    from .application import Application

__all__ = ["Commands", "DEFAULT_HINT"]

DEFAULT_HINT = """
See 'APPLICATION help COMMAND' for more information on a specific command.
"""


class Commands:
    """Dispatches the command line to the matching command."""

    def __init__(
        self,
        app: Application | None = None,
        settings: Settings | None = None,
        namespaces: Iterable[str] | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        self.app = app
        if settings is None:
            settings = app.settings if app is not None else Settings.from_environ()
        self.settings = settings
        self.registry = registry if registry is not None else CommandRegistry(namespaces)
        self.message = extract_usage(sys.modules[__name__].__doc__) + "\nCommands:\n"
        """ Short usage message shown before listing available commands """
        self.hint = DEFAULT_HINT
        """ Short hint shown after listing available commands """
        self.log = get_logger("commands")

    @property
    def namespaces(self) -> list[str]:
        """Namespaces to load commands from, searched in order."""
        return self.registry.namespaces

    @namespaces.setter
    def namespaces(self, value: Iterable[str]) -> None:
        self.registry.namespaces = list(value)

    def detect(self, guess: str | None = None) -> str | None:
        """Try to detect the deployment environment."""
        return detect(guess, self.settings.environ)

    def _invocation(self, name: str | None, args: list[str]) -> Invocation | None:
        """Decide whether `name` should be dispatched, and in which mode."""
        if name is None or not is_command_name(name) or (name == "help" and not (args and args[0])):
            return None
        is_help = name == "help"
        if is_help:
            name = args.pop(0)
        self.settings.help = is_help = self.settings.help or is_help
        return Invocation(name=name, args=args, help=is_help)

    def dispatch(self, invocation: Invocation) -> Any:
        """Resolve and invoke a command.

        Raises `UnknownCommandError` when no namespace provides it.
        """
        descriptor = self.registry.resolve(invocation.name)
        if descriptor is None:
            raise UnknownCommandError(invocation.name)

        self.log.debug("Running %s (%s) %s", invocation.name, descriptor.qualified_name, invocation.args)
        command = descriptor.factory(app=self.app)
        if invocation.help:
            return command.help(*invocation.args)
        return command.run(*invocation.args)

    def list_commands(self) -> str:
        """Return the listing of every available command."""
        return get_help(self.registry.discover(), self.message, self.hint)

    def run(self, name: str | None = None, *args: str) -> Any:
        """Load and run commands.

        Args:
            name: Command name, detected from the environment unless disabled
            *args: Arguments forwarded to the command

        Returns:
            The result of the command, the application when loaded as a
            library, or `ExitCode.SUCCESS` after listing the commands
        """
        if self.settings.app_loader:
            return self.app

        if not self.settings.no_detect:
            name = self.detect(name)

        invocation = self._invocation(name, list(args))
        if invocation is not None:
            return self.dispatch(invocation)

        # Hide list for tests
        if self.settings.harness_active:
            return ExitCode.SUCCESS

        print(self.list_commands(), end="")
        return ExitCode.SUCCESS
