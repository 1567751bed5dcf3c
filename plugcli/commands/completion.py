"""Print a shell completion script for the application.

Usage: APPLICATION completion SHELL [OPTIONS]

  ./myapp.py completion bash > ~/.local/share/bash-completion/completions/myapp
  ./myapp.py completion zsh > ~/.zsh/completions/_myapp

Options:
  -h, --help   Show this summary of available options

Supported shells: bash, zsh and tcsh.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

import shtab

from ..command_registry import CommandRegistry
from ..constants import SUPPORTED_SHELLS
from ..models import CommandDescriptor, ExitCode
from .interface import Command


def get_parser(commands: Iterable[CommandDescriptor], prog: str) -> argparse.ArgumentParser:
    """Build a parser describing the global options and every command.

    Only used to generate completion scripts, never to parse arguments.
    """
    commands = sorted(commands, key=lambda c: c.name)
    parser = argparse.ArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true", help="Get more information on a specific command")
    parser.add_argument("--home", metavar="path", help="Path to your applications home directory").complete = shtab.DIRECTORY
    parser.add_argument("-m", "--mode", metavar="name", help="Operating mode for your application")

    subparsers = parser.add_subparsers(dest="command")
    help_parser = subparsers.add_parser("help", help="Show help for a command")
    help_parser.add_argument("topic", nargs="?", choices=[c.name for c in commands])

    for descriptor in commands:
        sub = subparsers.add_parser(descriptor.name, help=descriptor.description)
        for position, arg in enumerate(descriptor.args, 1):
            kwargs: dict = {"metavar": arg.value, "help": arg.value}
            if not arg.required:
                kwargs["nargs"] = "?"
            if "|" in arg.value:
                kwargs["choices"] = arg.value.split("|")
            sub.add_argument(f"arg{position}", **kwargs)

    return parser


class Extension(Command):
    """<bash|zsh|tcsh> Print a shell completion script."""

    def run(self, *args: str) -> ExitCode:
        if not args or args[0] not in SUPPORTED_SHELLS:
            self.log.error("Expected one of %s, got %s", ", ".join(SUPPORTED_SHELLS), args[0] if args else "nothing")
            print(self.get_usage(), end="", file=sys.stderr)
            return ExitCode.USAGE_ERROR

        registry = self.app.commands.registry if self.app is not None else CommandRegistry()
        parser = get_parser(registry.discover(), prog=Path(sys.argv[0]).name)
        print(shtab.complete(parser, shell=args[0]))
        return ExitCode.SUCCESS
