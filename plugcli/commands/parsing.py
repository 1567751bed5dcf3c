"""Docstring parsing utilities for commands."""

from __future__ import annotations

import re
import textwrap

from ..models import CommandArg

__all__ = ["extract_usage", "parse_docstring"]

# Regex pattern to match args: <required> or [optional]
_ARG_PATTERN = re.compile(r"([<\[])([^>\]]+)([>\]])")

_USAGE_PATTERN = re.compile(r"^[ \t]*Usage:", re.MULTILINE)

NO_DESCRIPTION = "No description."


def parse_docstring(docstring: str | None) -> tuple[list[CommandArg], str, str]:
    """Parse a docstring to extract arguments and descriptions.

    The first line may start with arguments like:
    "<shell> Print a completion script" or "[path] Show something"

    Args:
        docstring: The raw docstring to parse

    Returns:
        Tuple of (args, short_description, full_description)
        - args: List of CommandArg objects
        - short_description: Text after arguments on first line
        - full_description: Complete docstring
    """
    if not docstring or not docstring.strip():
        return [], NO_DESCRIPTION, ""

    full_description = docstring.strip()
    first_line = full_description.split("\n")[0].strip()

    args: list[CommandArg] = []
    last_end = 0

    for match in _ARG_PATTERN.finditer(first_line):
        if match.start() != last_end and first_line[last_end : match.start()].strip():
            # There's non-whitespace before this match, stop parsing args
            break
        args.append(CommandArg(value=match.group(2), required=match.group(1) == "<"))
        last_end = match.end()
        while last_end < len(first_line) and first_line[last_end] == " ":
            last_end += 1

    short_description = first_line
    if args and first_line[last_end:].strip():
        short_description = first_line[last_end:].strip()

    return args, short_description, full_description


def extract_usage(docstring: str | None) -> str:
    """Return the usage section of a docstring.

    The section starts at the first line beginning with "Usage:" and runs to
    the end of the docstring. The result is dedented and ends with a newline,
    or is empty when there is no such section.
    """
    if not docstring:
        return ""
    match = _USAGE_PATTERN.search(docstring)
    if match is None:
        return ""
    section = textwrap.dedent(docstring[match.start() :]).strip("\n")
    return f"{section.rstrip()}\n"
