"""Error types raised by the argument scanner.

Every failure is reported as a single :class:`ArgScanError` carrying an
:class:`ErrorKind` discriminator and one human-readable message. Each error
is a fresh value owned by the call that raised it.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    ALLOCATION_FAILURE = "allocation_failure"
    UNKNOWN_OPTION = "unknown_option"
    SHORT_OPTIONS_COMBINED = "short_options_combined"
    COMBINED_OPTION_ORDERING = "combined_option_ordering"
    MISSING_OPTION_VALUE = "missing_option_value"
    OPTIONS_AFTER_POSITIONAL = "options_after_positional"
    SINK_REJECTION = "sink_rejection"


class ArgScanError(Exception):
    """Raised when an argument vector cannot be scanned."""

    kind: ErrorKind = ErrorKind.SINK_REJECTION

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        prog: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.prog = prog

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Return the message prefixed with the diagnostic name, if any."""
        if self.prog:
            return f"{self.prog}: {self.message}"
        return self.message


class AllocationError(ArgScanError):
    """Raised when the extras buffer cannot grow."""

    kind = ErrorKind.ALLOCATION_FAILURE


class UnknownOptionError(ArgScanError):
    """Raised for unrecognized identifiers when strict checking is enabled."""

    kind = ErrorKind.UNKNOWN_OPTION


class ShortOptionsCombinedError(ArgScanError):
    """Raised for a multi-character short cluster when combining is disabled."""

    kind = ErrorKind.SHORT_OPTIONS_COMBINED


class CombinedOptionOrderingError(ArgScanError):
    """Raised when a value-requiring short option is not last in its cluster."""

    kind = ErrorKind.COMBINED_OPTION_ORDERING


class MissingOptionValueError(ArgScanError):
    """Raised when a value-requiring option is the final token."""

    kind = ErrorKind.MISSING_OPTION_VALUE


class OptionsAfterPositionalError(ArgScanError):
    """Raised under posix-strict ordering when an option follows an extra."""

    kind = ErrorKind.OPTIONS_AFTER_POSITIONAL


class SinkRejectionError(ArgScanError):
    """Raised when the value-setting sink refuses a value.

    The sink's own exception is kept as ``__cause__``.
    """

    kind = ErrorKind.SINK_REJECTION


__all__ = [
    "AllocationError",
    "ArgScanError",
    "CombinedOptionOrderingError",
    "ErrorKind",
    "MissingOptionValueError",
    "OptionsAfterPositionalError",
    "ShortOptionsCombinedError",
    "SinkRejectionError",
    "UnknownOptionError",
]
