"""Global command line options (-h/--help, --home, -m/--mode).

These are consumed before any command sees its arguments. Everything else,
unknown options included, is passed through untouched and in order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from .detect import detect
from .logging_setup import get_logger
from .settings import Settings

__all__ = ["prepare_options"]

_HELP_FLAGS = ("-h", "--help")

# flag -> (settings attribute, converter)
_VALUE_FLAGS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "--home": ("home", Path),
    "-m": ("mode", str),
    "--mode": ("mode", str),
}


def _split(arg: str) -> tuple[str, str | None]:
    """Split `--name=value` forms of the long value flags."""
    name, sep, value = arg.partition("=")
    if sep and name.startswith("--") and name in _VALUE_FLAGS:
        return name, value
    return arg, None


def prepare_options(argv: Sequence[str], settings: Settings, environ: Mapping[str, str] | None = None) -> list[str]:
    """Extract the global options from `argv` into `settings`.

    Arguments are read once, left to right. A value flag takes the next
    token as its value, even when it starts with a dash. Scanning stops at
    `--`. Nothing is consumed when running under a detected deployment
    environment (CGI, PSGI), where the command line is meaningless.

    Args:
        argv: Arguments, without the program name
        settings: Settings to update; flags override environment values
        environ: Environment used for detection, defaults to the one
            captured in `settings`

    Returns:
        The remaining arguments
    """
    tokens = list(argv)
    if detect(environ=settings.environ if environ is None else environ):
        return tokens

    remaining: list[str] = []
    i = 0
    while i < len(tokens):
        arg = tokens[i]
        if arg == "--":
            remaining.extend(tokens[i:])
            break
        name, value = _split(arg)
        if arg in _HELP_FLAGS:
            settings.help = True
        elif name in _VALUE_FLAGS:
            if value is None:
                if i + 1 >= len(tokens) or tokens[i + 1] == "--":
                    get_logger("options").warning("Option %s requires an argument", name)
                    remaining.append(arg)
                    i += 1
                    continue
                i += 1
                value = tokens[i]
            attribute, convert = _VALUE_FLAGS[name]
            # the last occurrence wins
            setattr(settings, attribute, convert(value))
        else:
            remaining.append(arg)
        i += 1

    return remaining
