"""Hand the application over to a WSGI server.

Usage: APPLICATION psgi [OPTIONS]

  PSGI_ENV=production gunicorn 'myapp:application'

  # in myapp.py
  application = MyApp().start()

Options:
  -h, --help   Show this summary of available options

The command is usually picked automatically when PSGI_ENV is set, and
returns the WSGI callable instead of running anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .interface import Command

if TYPE_CHECKING:
    from ..application import Application


class Extension(Command):
    """Start application with a PSGI-style (WSGI) server."""

    def run(self, *args: str) -> Application:
        if self.app is None:
            raise RuntimeError("No application to hand over")
        self.log.info("Handing over application in %s mode", self.app.mode)
        return self.app
