"""Show versions of the installed core and optional modules.

Usage: APPLICATION version [OPTIONS]

  ./myapp.py version

Options:
  -h, --help   Show this summary of available options
"""

from __future__ import annotations

import platform
from importlib.metadata import PackageNotFoundError, version

from ..models import ExitCode
from ..version import VERSION
from .interface import Command

OPTIONAL_MODULES = ("shtab",)


def module_version(name: str) -> str:
    """Return the installed version of distribution `name`, or "n/a"."""
    try:
        return version(name)
    except PackageNotFoundError:
        return "n/a"


class Extension(Command):
    """Show versions of available modules."""

    def run(self, *args: str) -> ExitCode:
        lines = [
            "CORE",
            f"  Python   ({platform.python_version()}, {platform.system()})",
            f"  plugcli  ({VERSION})",
            "",
            "OPTIONAL",
        ]
        lines.extend(f"  {name:8s} ({module_version(name)})" for name in OPTIONAL_MODULES)
        print("\n".join(lines))
        return ExitCode.SUCCESS
