"""Shared constants for plugcli."""

__all__ = [
    "APP_LOADER_VAR",
    "CGI_MARKERS",
    "CONFIG_FILE_NAME",
    "CONFIG_VAR",
    "DEBUG_VAR",
    "DEFAULT_MODE",
    "DEFAULT_NAMESPACES",
    "HARNESS_VAR",
    "HELP_VAR",
    "HOME_VAR",
    "MODE_VAR",
    "NO_DETECT_VAR",
    "PSGI_MARKER",
    "SUPPORTED_SHELLS",
]

# Deployment markers, checked in this order by `plugcli.detect.detect`
PSGI_MARKER = "PSGI_ENV"  # value is also the default operating mode
CGI_MARKERS = ("PATH_INFO", "GATEWAY_INTERFACE")  # presence only

# Switches
NO_DETECT_VAR = "PLUGCLI_NO_DETECT"
APP_LOADER_VAR = "PLUGCLI_APP_LOADER"
HARNESS_VAR = "PYTEST_CURRENT_TEST"
DEBUG_VAR = "PLUGCLI_DEBUG"
CONFIG_VAR = "PLUGCLI_CONFIG"

# Values also settable with -h/--help, --home and -m/--mode
HELP_VAR = "PLUGCLI_HELP"
HOME_VAR = "PLUGCLI_HOME"
MODE_VAR = "PLUGCLI_MODE"

DEFAULT_MODE = "development"
DEFAULT_NAMESPACES = ("plugcli.commands",)

CONFIG_FILE_NAME = "plugcli.toml"

# Supported shells for completion generation
SUPPORTED_SHELLS = ("bash", "zsh", "tcsh")
