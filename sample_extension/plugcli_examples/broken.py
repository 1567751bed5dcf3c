"""A command failing at import time."""

import plugcli_examples_missing_dependency  # noqa: F401

from plugcli.commands.interface import Command


class Extension(Command):
    """Never loaded."""

    def run(self, *args: str) -> None:
        pass
