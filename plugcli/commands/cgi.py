"""Start the application with the CGI backend.

Usage: APPLICATION cgi [OPTIONS]

  ./myapp.py cgi

Options:
  -h, --help   Show this summary of available options

The command is usually picked automatically when PATH_INFO or
GATEWAY_INTERFACE are set.
"""

from __future__ import annotations

from wsgiref.handlers import CGIHandler

from ..models import ExitCode
from .interface import Command


class Extension(Command):
    """Start application with CGI."""

    def run(self, *args: str) -> ExitCode:
        if self.app is None:
            self.log.error("No application to serve")
            return ExitCode.COMMAND_ERROR
        CGIHandler().run(self.app)
        return ExitCode.SUCCESS
