"""Greet someone.

Usage: APPLICATION greet <name> [greeting]

  ./myapp.py greet world
  ./myapp.py greet world Howdy

Options:
  -h, --help   Show this summary of available options
"""

from plugcli.commands.interface import Command
from plugcli.models import ExitCode


class Extension(Command):
    """<name> [greeting] Greet someone from the command line."""

    def run(self, *args: str) -> ExitCode:
        if not args:
            return self.help()
        greeting = args[1] if len(args) > 1 else "Hello"
        print(f"{greeting}, {args[0]}! ({self.app.mode if self.app else 'no app'})")
        return ExitCode.SUCCESS
