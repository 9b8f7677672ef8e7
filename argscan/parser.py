"""Argument scanner: classifies tokens and binds option values.

Each token of the argument vector is classified by its leading dashes
(at most two are counted):

* no dash, or a lone ``-``: an *extra* (positional), collected in order;
* one dash: a *short cluster* such as ``-abc``;
* two dashes: a *long option* such as ``--name`` or ``--name=value``;
* a bare ``--``: every later token is collected as an extra verbatim.

Matched options are handed to a value-setting *sink*, any callable accepting
``(option, value)`` where ``value`` is ``None`` for flag-style options. The
first error aborts the scan; collected extras are discarded and the error is
raised (:func:`parse`) or returned (:func:`try_parse`).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, cast

from argscan._constants import (
    END_OF_OPTIONS,
    LONG_VALUE_SEPARATOR,
    MAX_PREFIX_DASHES,
    OPTION_PREFIX,
    STDIN_ARGUMENT,
)
from argscan.context import ContextFlags, ScanContext
from argscan.errors import (
    AllocationError,
    ArgScanError,
    CombinedOptionOrderingError,
    MissingOptionValueError,
    OptionsAfterPositionalError,
    ShortOptionsCombinedError,
    SinkRejectionError,
    UnknownOptionError,
)
from argscan.helpers import log_debug
from argscan.options import DestinationSetter, Option

Sink = Callable[[Option, str | None], Any]

__all__ = [
    "ArgScanner",
    "ParseOutcome",
    "ParseResult",
    "Sink",
    "parse",
    "parse_into",
    "prefix_size",
    "try_parse",
]


class ParseResult(NamedTuple):
    extras: list[str]
    count: int


@dataclass(frozen=True)
class ParseOutcome:
    """Either a :class:`ParseResult` or an :class:`ArgScanError`, never both."""

    result: ParseResult | None = None
    error: ArgScanError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("ParseOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ParseResult:
        """Return the result, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return cast(ParseResult, self.result)


def prefix_size(arg: str) -> int:
    """Count leading dashes of *arg*, capped at ``MAX_PREFIX_DASHES``."""
    size = 0
    while size < MAX_PREFIX_DASHES and arg[size : size + 1] == OPTION_PREFIX:
        size += 1
    return size


class ArgScanner:
    """Single-use scanning state for one argument vector."""

    def __init__(self, context: ScanContext, sink: Sink) -> None:
        self.context = context
        self.sink = sink
        self.argv: list[str] = []
        self.index = 0
        self.extras: list[str] = []
        self.forward_all = False

    def scan(self, argv: Sequence[str]) -> ParseResult:
        self.argv = list(argv)
        self.forward_all = False
        self.index = 0 if self.context.has_flag(ContextFlags.KEEP_FIRST) else 1
        log_debug(
            f"Scanning {len(self.argv)} arguments for {self.context.name} "
            f"(flags={self.context.flags!r})"
        )

        try:
            while self.index < len(self.argv):
                self._process_argument(self.argv[self.index])
                self.index += 1
        except ArgScanError as e:
            self.extras = []
            if e.prog is None:
                e.prog = self.context.name
            log_debug(f"Scan failed at index {self.index}: {e.describe()}")
            raise

        extras, self.extras = self.extras, []
        log_debug(f"Scan finished with {len(extras)} extras")
        return ParseResult(extras, len(extras))

    def _process_argument(self, arg: str) -> None:
        if self.forward_all:
            self._handle_extra(arg)
            return

        size = prefix_size(arg)
        if size == 0 or arg == STDIN_ARGUMENT:
            self._handle_extra(arg)
        elif arg == END_OF_OPTIONS:
            self.forward_all = True
        else:
            self._check_ordering(arg)
            if size == 1:
                self._handle_short(arg, arg[size:])
            else:
                self._handle_long(arg, arg[size:])

    def _handle_extra(self, arg: str) -> None:
        try:
            self.extras.append(arg)
        except MemoryError as e:
            raise self._error(
                AllocationError, "could not allocate extras array", arg
            ) from e

    def _check_ordering(self, arg: str) -> None:
        if self.context.has_flag(ContextFlags.POSIX_STRICT) and self.extras:
            raise self._error(
                OptionsAfterPositionalError,
                f"options cannot be specified after arguments: {arg}",
                arg,
            )

    def _handle_short(self, arg: str, cluster: str) -> None:
        sloppy = self.context.has_flag(ContextFlags.SLOPPY_SHORTS)

        if (
            len(cluster) > 1
            and self.context.has_flag(ContextFlags.NO_COMBINE)
            and not sloppy
        ):
            raise self._error(
                ShortOptionsCombinedError,
                f"short options cannot be combined: {arg}",
                arg,
            )

        if len(cluster) > 1 and sloppy:
            # The handler validates the attached value, required or not.
            option = self._lookup_short(cluster[0], arg)
            if option is not None:
                self._set(option, cluster[1:], arg)
            return

        last = len(cluster) - 1
        for position, identifier in enumerate(cluster):
            option = self._lookup_short(identifier, arg)
            if option is None:
                # Unknown identifier ends the cluster.
                return

            if not option.requires_value:
                self._set(option, None, arg)
            elif position != last:
                raise self._error(
                    CombinedOptionOrderingError,
                    f"combined short option requiring value not last: -{identifier}",
                    arg,
                )
            else:
                value = self._take_next_value(f"-{identifier}", arg)
                self._set(option, value, arg)

    def _handle_long(self, arg: str, body: str) -> None:
        name, separator, inline = body.partition(LONG_VALUE_SEPARATOR)
        option = self.context.find_long(name)
        if option is None:
            if self.context.has_flag(ContextFlags.STRICT):
                raise self._error(
                    UnknownOptionError, f"invalid argument: --{name}", arg
                )
            log_debug(f"Ignoring unknown long option --{name}")
            return

        if separator:
            value: str | None = inline
        elif option.requires_value:
            value = self._take_next_value(f"--{name}", arg)
        else:
            value = None
        self._set(option, value, arg)

    def _lookup_short(self, identifier: str, arg: str) -> Option | None:
        option = self.context.find_short(identifier)
        if option is None:
            if self.context.has_flag(ContextFlags.STRICT):
                raise self._error(
                    UnknownOptionError, f"invalid argument: -{identifier}", arg
                )
            log_debug(f"Unknown short option -{identifier} in {arg}; stopping")
        return option

    def _take_next_value(self, display: str, arg: str) -> str:
        if self.index + 1 >= len(self.argv):
            raise self._error(
                MissingOptionValueError, f"missing option value: {display}", arg
            )
        self.index += 1
        return self.argv[self.index]

    def _set(self, option: Option, value: str | None, arg: str) -> None:
        try:
            self.sink(option, value)
        except ArgScanError:
            raise
        except Exception as e:
            message = str(e) or f"could not set {option.display_name}"
            raise self._error(SinkRejectionError, message, arg) from e

    def _error(
        self, error_cls: type[ArgScanError], message: str, arg: str | None
    ) -> ArgScanError:
        return error_cls(message, argument=arg, prog=self.context.name)


def parse(context: ScanContext, argv: Sequence[str], sink: Sink) -> ParseResult:
    """Scan *argv* against *context*, feeding matched options to *sink*.

    Args:
        context: The option table and behavior flags.
        argv: Full argument vector; index 0 is skipped unless ``KEEP_FIRST``.
        sink: Value-setting callable invoked as ``sink(option, value)``.

    Returns:
        The positional arguments in order, with their count.

    Raises:
        ArgScanError: On the first malformed token or sink failure.
    """
    return ArgScanner(context, sink).scan(argv)


def try_parse(
    context: ScanContext, argv: Sequence[str], sink: Sink
) -> ParseOutcome:
    """Like :func:`parse`, but return failures instead of raising them."""
    try:
        return ParseOutcome(result=parse(context, argv, sink))
    except ArgScanError as e:
        return ParseOutcome(error=e)


def parse_into(
    context: ScanContext, argv: Sequence[str], destination: Any
) -> ParseResult:
    """Parse with a :class:`DestinationSetter`, seeding option defaults first."""
    setter = DestinationSetter(destination)
    setter.apply_defaults(context.options)
    return parse(context, argv, setter)
