"""Option table entries and the default value-setting sink.

An :class:`Option` describes one recognized switch: its short identifier,
its long name, whether it consumes a value, and how that value is coerced.
The scanner only reads ``short``, ``long`` and ``requires_value``; the rest is
handler metadata used by :class:`DestinationSetter`.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from argscan._constants import LONG_VALUE_SEPARATOR, OPTION_PREFIX
from argscan.helpers import log_debug, parse_bool


class OptionType(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


class Option(BaseModel):
    """One entry of an option table."""

    short: str | None = Field(None, min_length=1, max_length=1)
    long: str | None = Field(None, min_length=1)
    requires_value: bool = False
    type: OptionType = OptionType.BOOL
    dest: str = Field(..., min_length=1)
    default: Any = None
    description: str | None = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @model_validator(mode="before")
    @classmethod
    def derive_dest(cls, data: Any) -> Any:
        """Default ``dest`` to the long name (dashes to underscores) or the short id."""
        if not isinstance(data, dict) or data.get("dest"):
            return data
        data = dict(data)
        if data.get("long"):
            data["dest"] = str(data["long"]).replace("-", "_")
        elif data.get("short"):
            data["dest"] = data["short"]
        return data

    @field_validator("short")
    @classmethod
    def validate_short(cls, v: str | None) -> str | None:
        if v is not None and (v == OPTION_PREFIX or v.isspace()):
            raise ValueError(f"invalid short option identifier: {v!r}")
        return v

    @field_validator("long")
    @classmethod
    def validate_long(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if v.startswith(OPTION_PREFIX):
            raise ValueError(f"long option name must not start with a dash: {v!r}")
        if LONG_VALUE_SEPARATOR in v:
            raise ValueError(
                f"long option name must not contain {LONG_VALUE_SEPARATOR!r}: {v!r}"
            )
        return v

    @model_validator(mode="after")
    def validate_identity(self) -> Option:
        """Ensure the option can be named on a command line."""
        if self.short is None and self.long is None:
            raise ValueError("option needs a short identifier or a long name")
        return self

    @property
    def display_name(self) -> str:
        """Name as it is written on a command line, preferring the short form."""
        if self.short is not None:
            return f"-{self.short}"
        return f"--{self.long}"

    @property
    def identifiers(self) -> tuple[str, ...]:
        names = []
        if self.short is not None:
            names.append(f"-{self.short}")
        if self.long is not None:
            names.append(f"--{self.long}")
        return tuple(names)


def coerce_value(option: Option, value: str | None) -> Any:
    """Convert a raw command-line value according to ``option.type``.

    Args:
        option: The matched option.
        value: The raw string, or ``None`` when the option was given as a flag.

    Returns:
        The converted value. Flag-style bool options yield ``True``.

    Raises:
        ValueError: If the value is absent for a non-bool option, or cannot be
            converted.
    """
    if value is None:
        if option.type is OptionType.BOOL:
            return True
        raise ValueError(f"missing option value: {option.display_name}")

    if option.type is OptionType.STRING:
        return value

    try:
        if option.type is OptionType.BOOL:
            return parse_bool(value, strict=True)
        if option.type is OptionType.INT:
            return int(value)
        return float(value)
    except ValueError as e:
        raise ValueError(
            f"invalid {option.type.value} value for {option.display_name}: {value!r}"
        ) from e


class DestinationSetter:
    """Value-setting sink that stores coerced values on a destination.

    Mappings receive item assignment, every other object receives
    ``setattr``. Instances are callable with ``(option, value)`` and can be
    handed straight to :func:`argscan.parser.parse`.
    """

    def __init__(self, destination: Any) -> None:
        self.destination = destination

    def __call__(self, option: Option, value: str | None) -> None:
        converted = coerce_value(option, value)
        log_debug(f"Setting {option.dest!r} from {option.display_name}")
        self._store(option.dest, converted)

    def apply_defaults(self, options: Iterable[Option]) -> None:
        """Seed the destination with each option's ``default``."""
        for option in options:
            self._store(option.dest, option.default)

    def _store(self, key: str, value: Any) -> None:
        if isinstance(self.destination, MutableMapping):
            self.destination[key] = value
        else:
            setattr(self.destination, key, value)


__all__ = ["DestinationSetter", "Option", "OptionType", "coerce_value"]
