"""Shared fixtures and helpers for argscan tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from argscan.context import ContextFlags, ScanContext, create_context
from argscan.options import Option, OptionType


class RecordingSink:
    """Sink that remembers every ``(dest, value)`` pair it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def __call__(self, option: Option, value: str | None) -> None:
        self.calls.append((option.dest, value))


@pytest.fixture
def option_table() -> list[Option]:
    return [
        Option(short="a"),
        Option(short="b"),
        Option(short="c", long="config", requires_value=True, type=OptionType.STRING),
        Option(short="x"),
        Option(short="y"),
        Option(short="z"),
        Option(short="n", long="count", requires_value=True, type=OptionType.INT),
        Option(short="v", long="verbose"),
        Option(long="dry-run"),
    ]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_context(
    option_table: list[Option],
) -> Callable[..., ScanContext]:
    """Build a context over the shared option table with the given flags."""

    def factory(flags: ContextFlags = ContextFlags.NONE) -> ScanContext:
        return create_context("prog", option_table, flags)

    return factory
