"""Helper utility functions for argscan.

This module provides the logging helpers used throughout the argscan codebase.
They respect the environment configuration loaded by
:func:`argscan._constants.load_config`.
"""

from __future__ import annotations

import logging
from typing import Any

from argscan._constants import FALSE_VALUES, TRUE_VALUES, _parse_bool, load_config

# Load configuration once at module level for efficiency
_config = load_config()

# Set up module logger
logger = logging.getLogger(__name__)


def send_log(
    message: str,
    level: int = logging.INFO,
    logger_name: str | None = None,
    **kwargs: Any,
) -> None:
    """Send a log message if logging is enabled.

    This function checks the ARGSCAN_LOGGING_ENABLED configuration and only
    logs if it's enabled. This allows for conditional logging throughout
    the codebase without repeated environment checks.

    Args:
        message: The message to log
        level: The logging level (default: logging.INFO)
        logger_name: Optional logger name. If None, uses the module logger
        **kwargs: Additional keyword arguments to pass to the logging function
                 (e.g., exc_info, stack_info, stacklevel)

    Example:
        >>> send_log("Scan started", level=logging.DEBUG)
        >>> send_log("Custom logger message", logger_name="argscan.parser")
    """
    if not _config["ARGSCAN_LOGGING_ENABLED"]:
        return

    if logger_name:
        log = logging.getLogger(logger_name)
    else:
        log = logger

    log.log(level, message, **kwargs)


def log_debug(message: str, **kwargs: Any) -> None:
    """Equivalent to send_log(message, level=logging.DEBUG, **kwargs)."""
    send_log(message, level=logging.DEBUG, **kwargs)


def default_flag_names() -> list[str]:
    """Flag names configured through ARGSCAN_DEFAULT_FLAGS."""
    return list(_config["ARGSCAN_DEFAULT_FLAGS"])


def parse_bool(value: str | None, *, strict: bool = False) -> bool:
    """Interpret *value* the same way boolean settings are read.

    With ``strict=True`` only the spellings in ``TRUE_VALUES`` and
    ``FALSE_VALUES`` (any case) are accepted and anything else raises
    ``ValueError``; otherwise every non-false string is true.

    >>> parse_bool("yes")
    True
    >>> parse_bool("off")
    False
    """
    if not strict:
        return _parse_bool(value)

    normalized = (value or "").strip().upper()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def reload_config() -> None:
    """Reload configuration from environment variables.

    This function is primarily useful for testing or when environment
    variables might have changed during runtime.
    """
    global _config
    _config = load_config()


__all__ = [
    "default_flag_names",
    "log_debug",
    "parse_bool",
    "reload_config",
    "send_log",
]
