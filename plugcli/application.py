"""Application context handed to every command."""

from __future__ import annotations

import importlib
import inspect
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

from .config_loader import ConfigLoader
from .constants import DEFAULT_MODE, PSGI_MARKER
from .dispatcher import Commands
from .logging_setup import get_logger
from .models import ConfigError
from .options import prepare_options
from .settings import Settings

__all__ = ["Application", "load_app", "prepare_app", "start_app"]

StartResponse = Callable[..., Any]


class Application:
    """Minimal hosting application: home, mode, commands and a WSGI entry point."""

    namespaces: tuple[str, ...] = ()
    " extra command namespaces, searched after the built-in ones "

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings.from_environ()
        self.log = get_logger("app")
        self.commands = Commands(app=self, settings=self.settings)
        self.commands.namespaces = [*self.commands.namespaces, *self.namespaces]
        self._configure(ConfigLoader(self.log).load(self.settings.config_file, self.home))

    def _configure(self, config: dict[str, Any]) -> None:
        """Apply the `[plugcli]` section of the configuration file."""
        section = config.get("plugcli", {})
        extra = section.get("namespaces", [])
        if not isinstance(extra, list) or not all(isinstance(ns, str) for ns in extra):
            self.log.critical("plugcli.namespaces must be a list of strings, got %r", extra)
            raise ConfigError("plugcli.namespaces must be a list of strings")
        for namespace in extra:
            if namespace not in self.commands.namespaces:
                self.commands.namespaces.append(namespace)
        if "message" in section:
            self.commands.message = section["message"]
        if "hint" in section:
            self.commands.hint = section["hint"]

    @property
    def home(self) -> Path:
        """Home directory of the application."""
        if self.settings.home is not None:
            return self.settings.home
        module = sys.modules.get(type(self).__module__)
        filename = getattr(module, "__file__", None)
        if type(self) is not Application and filename:
            return Path(filename).resolve().parent
        return Path.cwd()

    @property
    def mode(self) -> str:
        """Operating mode of the application."""
        return self.settings.mode or self.settings.environ.get(PSGI_MARKER) or DEFAULT_MODE

    def handler(self, environ: dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        """Handle a request, override in subclasses."""
        start_response("404 Not Found", [("Content-Type", "text/plain; charset=utf-8")])
        return [b"Not Found\n"]

    def __call__(self, environ: dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        return self.handler(environ, start_response)

    def start(self, *args: str) -> Any:
        """Start the command line interface.

        Uses `sys.argv` when no arguments are given, after consuming its
        global options into `settings`.
        """
        if not args:
            args = tuple(prepare_options(sys.argv[1:], self.settings))
        return self.commands.run(*args)


def _import_target(target: str | type[Application] | Application) -> Any:
    """Import "module:attribute" strings, the attribute defaults to `app`."""
    if isinstance(target, str):
        module_name, _, attribute = target.partition(":")
        return getattr(importlib.import_module(module_name), attribute or "app")
    return target


def load_app(target: str | type[Application] | Application, settings: Settings | None = None) -> Application:
    """Build an application from an instance, a class or a "module:attribute" string.

    `settings` is only used when a new application is built.
    """
    target = _import_target(target)
    if inspect.isclass(target):
        return target(settings=settings)
    if not isinstance(target, Application):
        raise TypeError(f"{target!r} is not an Application")
    return target


def prepare_app(
    target: str | type[Application] | Application, argv: Sequence[str], settings: Settings | None = None
) -> tuple[Application, list[str]]:
    """Load an application and consume the global options of `argv` into its settings.

    A new application is built from the already updated settings, so
    `--home` also applies to the configuration file lookup.

    Returns:
        The application and the remaining arguments
    """
    target = _import_target(target)
    if isinstance(target, Application):
        return target, prepare_options(argv, target.settings)
    if settings is None:
        settings = Settings.from_environ()
    args = prepare_options(argv, settings)
    return load_app(target, settings=settings), args


def start_app(target: str | type[Application] | Application, *args: str) -> Any:
    """Load an application and start the command line interface for it.

    Without arguments the command line is read from `sys.argv`.

    Eg:
        start_app("myapp:MyApp")
        start_app(MyApp, "psgi")
    """
    if args:
        return load_app(target).start(*args)
    application, argv = prepare_app(target, sys.argv[1:])
    return application.commands.run(*argv)
