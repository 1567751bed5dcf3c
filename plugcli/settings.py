"""Process-wide settings, read once from the environment.

`Settings` is the single object holding what used to be scattered
environment lookups (help flag, home, mode and the dispatch switches).
It is built by the entry point, updated by the option preparser and then
passed by reference to the dispatcher, the application and the commands.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .constants import (
    APP_LOADER_VAR,
    CONFIG_VAR,
    DEBUG_VAR,
    HARNESS_VAR,
    HELP_VAR,
    HOME_VAR,
    MODE_VAR,
    NO_DETECT_VAR,
)

__all__ = ["BOOL_FALSE_STRINGS", "Settings", "coerce_to_bool"]

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: str | bool | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


@dataclass
class Settings:
    """Global options shared by every component of a dispatch."""

    help: bool = False
    home: Path | None = None
    mode: str | None = None
    no_detect: bool = False
    app_loader: bool = False
    harness_active: bool = False
    debug: bool = False
    config_file: Path | None = None
    environ: Mapping[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build the settings from an environment mapping (defaults to `os.environ`)."""
        env = dict(os.environ if environ is None else environ)
        home = env.get(HOME_VAR)
        config_file = env.get(CONFIG_VAR)
        return cls(
            help=coerce_to_bool(env.get(HELP_VAR)),
            home=Path(home) if home else None,
            mode=env.get(MODE_VAR) or None,
            no_detect=coerce_to_bool(env.get(NO_DETECT_VAR)),
            app_loader=APP_LOADER_VAR in env,
            harness_active=coerce_to_bool(env.get(HARNESS_VAR)),
            debug=coerce_to_bool(env.get(DEBUG_VAR)),
            config_file=Path(config_file).expanduser() if config_file else None,
            environ=env,
        )
