"""plugcli - command line entry point."""

from __future__ import annotations

import sys
from typing import Any

from .application import Application, prepare_app
from .logging_setup import get_logger, init_logger
from .models import CommandLoadError, ConfigError, ExitCode, PlugcliError, UnknownCommandError
from .settings import Settings

__all__ = ["exit_code", "main", "run"]


def exit_code(result: Any) -> int:
    """Convert the result of a command into a process exit code."""
    if isinstance(result, bool):
        return ExitCode.SUCCESS if result else ExitCode.COMMAND_ERROR
    if isinstance(result, int):
        return int(result)
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None, app: str | type[Application] | Application = Application) -> int:
    """Run the command line interface and return the exit code.

    Args:
        argv: Arguments without the program name, defaults to `sys.argv[1:]`
        app: Application to start, as accepted by `load_app`
    """
    settings = Settings.from_environ()
    init_logger(force_debug=settings.debug)
    log = get_logger("startup")

    try:
        application, args = prepare_app(app, sys.argv[1:] if argv is None else argv, settings)
        return exit_code(application.commands.run(*args))
    except KeyboardInterrupt:
        return ExitCode.COMMAND_ERROR
    except UnknownCommandError as e:
        print(e, file=sys.stderr)
        return ExitCode.USAGE_ERROR
    except (CommandLoadError, ConfigError) as e:
        log.critical("%s", e)
        return ExitCode.LOAD_ERROR
    except PlugcliError as e:
        log.critical("Command failed: %s", e)
        return ExitCode.COMMAND_ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        return ExitCode.COMMAND_ERROR


def run() -> None:
    """Console script wrapper around `main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
