"""Configuration file loading.

The configuration is an optional TOML file, either given explicitly
(`PLUGCLI_CONFIG`) or found in the application home as `plugcli.toml`.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE_NAME
from .models import ConfigError

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading configuration files."""

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    def load(self, config_file: Path | str | None = None, home: Path | None = None) -> dict[str, Any]:
        """Load the configuration.

        Args:
            config_file: Explicit file, it must exist
            home: Directory searched for the default file, which may be missing

        Returns:
            The configuration dictionary (empty when there is no file)

        Raises:
            ConfigError: If the explicit file is missing or a file has syntax errors
        """
        if config_file:
            fname = Path(os.path.expandvars(str(config_file))).expanduser()
            if not fname.exists():
                self.log.critical("Config file not found: %s", fname)
                raise ConfigError(f"Config file not found: {fname}")
            return self._load_config_file(fname)

        if home is not None and (home / CONFIG_FILE_NAME).exists():
            return self._load_config_file(home / CONFIG_FILE_NAME)

        return {}

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file.

        Args:
            fname: Path to the configuration file

        Raises:
            ConfigError: If the file has syntax errors
        """
        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", fname, e)
                raise ConfigError(f"Problem reading {fname}: {e}") from e
