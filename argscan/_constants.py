"""Constants and configuration for argscan.

This module centralizes all constants and environment variable configuration
for argscan. Constants are immutable values that describe the token grammar
the scanner recognizes and the defaults it applies.

Environment Variables:
    See the load_config() function for a complete list of supported environment
    variables and their default values.

Usage:
    from argscan._constants import END_OF_OPTIONS, load_config

    # Use constants directly
    if token == END_OF_OPTIONS:
       #....

    # Load configuration once at module level
    _config = load_config()
    use_logging = _config["ARGSCAN_LOGGING_ENABLED"]

"""

import os
from typing import Any, Final

# ==============================================================================
# VERSION INFORMATION
# ==============================================================================

__version__: Final[str] = "0.1.0"
"""Current version of argscan."""

# ==============================================================================
# PROGRAM IDENTIFICATION
# ==============================================================================

PROG_NAME: Final[str] = "argscan"
"""Program name used as the default diagnostic name in error messages."""

# ==============================================================================
# TOKEN GRAMMAR
# ==============================================================================

OPTION_PREFIX: Final[str] = "-"
"""Character that introduces short and long options."""

MAX_PREFIX_DASHES: Final[int] = 2
"""Leading dashes counted when classifying a token (0 extra, 1 short, 2 long)."""

END_OF_OPTIONS: Final[str] = "--"
"""Bare sentinel that forwards every later token to the extras."""

LONG_VALUE_SEPARATOR: Final[str] = "="
"""Separator between a long option name and its inline value."""

STDIN_ARGUMENT: Final[str] = "-"
"""A lone dash, conventionally meaning stdin; scanned as a positional."""

# ==============================================================================
# BOOLEAN SPELLINGS
# ==============================================================================

TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "T", "Y", "YES", "ON", "TRUE"})
"""Upper-cased spellings accepted as true for bool option values."""

FALSE_VALUES: Final[frozenset[str]] = frozenset(
    {"0", "F", "N", "NO", "OFF", "NONE", "NULL", "FALSE"}
)
"""Upper-cased spellings read as false, in option values and settings."""


def _parse_bool(value: str | None) -> bool:
    """Parse a boolean value from environment variable string.

    Args:
        value: String value from environment variable

    Returns:
        False if value is None, empty, or one of FALSE_VALUES (any case)
        True otherwise (for any non-empty string not in the false list)
    """
    if not value:
        return False

    return value.upper() not in FALSE_VALUES


def _parse_name_list(value: str | None) -> list[str]:
    """Split a comma-separated environment value into stripped, non-empty names."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def load_environment() -> dict[str, Any]:
    """Load configuration from environment variables.

    This function reads all argscan environment variables and returns
    a configuration dictionary with validated values.

    Returns:
        dict: Configuration dictionary with the following keys:

            ARGSCAN_LOGGING_ENABLED (bool): Enable logging output.
                Default: False (disabled)
                Set to "1" to enable logging throughout argscan.
                Records go through Python's logging module; configure levels
                and handlers in your application as needed.

            ARGSCAN_DEFAULT_FLAGS (list[str]): Flag names applied by
                create_context() when the caller passes ``flags=None``.
                Default: [] (no flags)
                Comma separated, e.g. "strict,posix-strict-ordering".
    """
    return {
        # Logging - strict "1" check
        "ARGSCAN_LOGGING_ENABLED": os.environ.get("ARGSCAN_LOGGING_ENABLED", "0")
        == "1",
        "ARGSCAN_DEFAULT_FLAGS": _parse_name_list(
            os.environ.get("ARGSCAN_DEFAULT_FLAGS")
        ),
    }


def load_config() -> dict[str, Any]:
    """Public entry point for retrieving the current configuration.

    Returns:
        A fresh configuration dictionary containing all ARGSCAN_* keys.

    Notes:
        The returned dictionary is not cached; callers should cache it themselves
        if repeated lookups are required.
    """
    return load_environment()
