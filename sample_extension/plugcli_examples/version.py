"""Shadowed by the built-in version command, which comes first."""

from plugcli.commands.interface import Command


class Extension(Command):
    """Never listed: the built-in namespace is searched first."""

    def run(self, *args: str) -> str:
        return "sample"
