"""Scan context: the option table, behavior flags and diagnostic name.

A :class:`ScanContext` is built once with :func:`create_context` and never
changes afterwards. The scanner only reads it, so a single context can be
shared by concurrent parse calls as long as their sinks are not shared.

Key behaviours
--------------
* **Lookup order** – ``find_short`` and ``find_long`` return the *first*
  matching entry in table order. Duplicate identifiers are not rejected; later
  duplicates are simply unreachable.
* **Default flags** – when ``flags`` is ``None`` the names listed in
  ``ARGSCAN_DEFAULT_FLAGS`` are applied (see :mod:`argscan._constants`).
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from argscan._constants import PROG_NAME
from argscan.helpers import default_flag_names
from argscan.options import Option

__all__ = ["ContextFlags", "ScanContext", "create_context"]

logger = logging.getLogger(__name__)


class ContextFlags(enum.IntFlag):
    """Independent behavior switches for the scanner."""

    NONE = 0
    KEEP_FIRST = enum.auto()
    """Do not skip argument-vector index 0."""
    POSIX_STRICT = enum.auto()
    """Options may not follow a collected positional argument."""
    NO_COMBINE = enum.auto()
    """Reject multi-character short clusters."""
    SLOPPY_SHORTS = enum.auto()
    """Treat the rest of a short cluster as the first option's value."""
    STRICT = enum.auto()
    """Unknown identifiers are errors instead of being ignored."""

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ContextFlags:
        """Combine flags given by name.

        Member names and their long spellings are both accepted, in either
        kebab-case or snake_case, e.g. ``"posix-strict-ordering"`` or
        ``"POSIX_STRICT"``.

        Raises:
            ValueError: If a name matches no flag.
        """
        result = cls.NONE
        for raw in names:
            key = raw.strip().lower().replace("-", "_")
            if not key:
                continue
            member = _FLAG_ALIASES.get(key)
            if member is None:
                try:
                    member = cls[key.upper()]
                except KeyError:
                    raise ValueError(f"unknown context flag: {raw!r}") from None
            result |= member
        return result


_FLAG_ALIASES: dict[str, ContextFlags] = {
    "keep_first_argument": ContextFlags.KEEP_FIRST,
    "posix_strict_ordering": ContextFlags.POSIX_STRICT,
    "no_combine_short_options": ContextFlags.NO_COMBINE,
    "sloppy_short_options": ContextFlags.SLOPPY_SHORTS,
    "strict_unknown_options": ContextFlags.STRICT,
}


@dataclass(frozen=True)
class ScanContext:
    """Immutable configuration borrowed by every parse call."""

    name: str
    """Diagnostic name used in error messages."""

    options: tuple[Option, ...]
    """Option table in caller order."""

    flags: ContextFlags = ContextFlags.NONE
    """Behavior switches."""

    _by_short: dict[str, Option] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _by_long: dict[str, Option] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))
        by_short: dict[str, Option] = {}
        by_long: dict[str, Option] = {}
        for option in self.options:
            if option.short is not None:
                by_short.setdefault(option.short, option)
            if option.long is not None:
                by_long.setdefault(option.long, option)
        object.__setattr__(self, "_by_short", by_short)
        object.__setattr__(self, "_by_long", by_long)

    def has_flag(self, flag: ContextFlags) -> bool:
        return bool(self.flags & flag)

    def find_short(self, identifier: str) -> Option | None:
        """Return the first option whose short identifier is *identifier*."""
        return self._by_short.get(identifier)

    def find_long(self, name: str) -> Option | None:
        """Return the first option whose long name is *name*."""
        return self._by_long.get(name)


def create_context(
    name: str | None,
    options: Iterable[Option | Mapping[str, Any]],
    flags: ContextFlags | int | None = None,
) -> ScanContext:
    """Construct a :class:`ScanContext`.

    Args:
        name: Diagnostic name used in error messages. Defaults to ``PROG_NAME``.
        options: Option table. Mappings are validated into :class:`Option`.
        flags: Behavior switches. When ``None`` the flags configured through
            ``ARGSCAN_DEFAULT_FLAGS`` are used.

    Returns:
        A fully built :class:`ScanContext`.

    Raises:
        pydantic.ValidationError: If a mapping is not a valid option.
        ValueError: If ``ARGSCAN_DEFAULT_FLAGS`` names an unknown flag.
    """
    table = tuple(
        option if isinstance(option, Option) else Option.model_validate(option)
        for option in options
    )
    if flags is None:
        resolved = ContextFlags.from_names(default_flag_names())
    else:
        resolved = ContextFlags(flags)

    context = ScanContext(name=name or PROG_NAME, options=table, flags=resolved)
    if len(context._by_short) + len(context._by_long) < sum(
        len(option.identifiers) for option in table
    ):
        logger.debug("Option table for %s has duplicate identifiers", context.name)
    return context
