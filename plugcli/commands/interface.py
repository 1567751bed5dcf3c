"""Common command interface."""

from __future__ import annotations

import inspect
import sys
from typing import TYPE_CHECKING, Any, ClassVar

from ..logging_setup import get_logger
from ..models import CommandArg, ExitCode
from .parsing import extract_usage, parse_docstring

if TYPE_CHECKING:
    from ..application import Application

__all__ = ["Command"]


def _own_doc(cls: type) -> str | None:
    """Return the docstring of `cls` itself, not inherited."""
    doc = cls.__dict__.get("__doc__")
    return inspect.cleandoc(doc) if doc else None


class Command:
    """Base class for any plugcli command.

    A command module exposes its implementation as the `Extension` attribute,
    which must be a subclass of this class.
    """

    description: ClassVar[str] = ""
    " One-line description, defaults to the first line of the class docstring "

    usage: ClassVar[str] = ""
    " Usage text, defaults to the `Usage:` section of the module docstring "

    def __init__(self, app: Application | None = None, quiet: bool = False) -> None:
        "create a new command bound to `app`"
        self.app = app
        """ the owning application, may be None """
        self.quiet = quiet
        """ suppress progress output """
        self.name = self.__module__.rsplit(".", 1)[-1]
        self.log = get_logger(self.name)
        """ the logger to use for this command """

    @classmethod
    def get_description(cls) -> str:
        """Return the one-line description of this command."""
        if cls.description:
            return cls.description
        return parse_docstring(_own_doc(cls))[1]

    @classmethod
    def get_args(cls) -> list[CommandArg]:
        """Return the positional arguments announced by the class docstring."""
        return parse_docstring(_own_doc(cls))[0]

    @classmethod
    def extract_usage(cls) -> str:
        """Extract the usage section from the module docstring of this command."""
        module = sys.modules.get(cls.__module__)
        return extract_usage(module.__doc__ if module else None) or extract_usage(_own_doc(cls))

    @classmethod
    def get_usage(cls) -> str:
        """Return the usage text of this command."""
        return cls.usage or cls.extract_usage()

    # Functions to override

    def run(self, *args: str) -> Any:
        """Run the command, returning its result to the dispatcher."""
        raise NotImplementedError('Method "run" not implemented by subclass')

    # Generic implementations

    def help(self, *args: str) -> ExitCode:
        """Print the usage of this command."""
        print(self.get_usage(), end="")
        return ExitCode.SUCCESS

    def say(self, message: str) -> None:
        """Print a progress message unless `quiet` is set."""
        if not self.quiet:
            print(message)
