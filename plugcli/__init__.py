"""plugcli - pluggable command line dispatcher for web applications.

Detects the deployment environment (CGI, PSGI adapter or terminal), consumes
the global options, finds commands by scanning namespace packages and runs
the requested one, or lists them all.
"""

from .application import Application, start_app
from .commands.interface import Command
from .dispatcher import Commands
from .version import VERSION

__all__ = ["VERSION", "Application", "Command", "Commands", "start_app"]
