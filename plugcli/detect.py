"""Deployment environment detection."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .constants import CGI_MARKERS, PSGI_MARKER

__all__ = ["detect"]


def detect(guess: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the command implied by the environment, or `guess`.

    The PSGI marker is checked before the CGI markers, so it wins when both
    are present.

    Args:
        guess: Command name given on the command line (may be None)
        environ: Environment mapping, defaults to `os.environ`
    """
    env = os.environ if environ is None else environ

    if PSGI_MARKER in env:
        return "psgi"

    if any(marker in env for marker in CGI_MARKERS):
        return "cgi"

    return guess
