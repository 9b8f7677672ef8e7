"""Tests for option table entries and the default sink."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from argscan.context import ContextFlags, create_context
from argscan.errors import SinkRejectionError
from argscan.options import DestinationSetter, Option, OptionType, coerce_value
from argscan.parser import parse, parse_into


class TestOptionModel:
    def test_dest_from_long_name(self):
        option = Option(short="d", long="dry-run")

        assert option.dest == "dry_run"
        assert option.display_name == "-d"
        assert option.identifiers == ("-d", "--dry-run")

    def test_dest_from_short(self):
        option = Option(short="q")

        assert option.dest == "q"
        assert option.type is OptionType.BOOL
        assert option.requires_value is False

    def test_explicit_dest(self):
        option = Option(long="out", dest="output_path")

        assert option.dest == "output_path"
        assert option.display_name == "--out"

    def test_needs_identifier(self):
        with pytest.raises(ValidationError):
            Option(requires_value=True, dest="x")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"short": "-"},
            {"short": "ab"},
            {"short": ""},
            {"long": "--name"},
            {"long": "name=value"},
            {"short": "a", "unknown_field": 1},
        ],
    )
    def test_invalid_identifiers(self, kwargs):
        with pytest.raises(ValidationError):
            Option(**kwargs)

    def test_frozen(self):
        option = Option(short="a")

        with pytest.raises(ValidationError):
            option.short = "b"


class TestCoerceValue:
    @pytest.mark.parametrize(
        ("type_", "raw", "expected"),
        [
            (OptionType.STRING, "text", "text"),
            (OptionType.INT, "42", 42),
            (OptionType.INT, "-7", -7),
            (OptionType.FLOAT, "2.5", 2.5),
            (OptionType.BOOL, "yes", True),
            (OptionType.BOOL, "false", False),
            (OptionType.BOOL, None, True),
        ],
    )
    def test_conversions(self, type_, raw, expected):
        option = Option(long="opt", type=type_)

        assert coerce_value(option, raw) == expected

    def test_absent_value_for_string(self):
        option = Option(short="o", type=OptionType.STRING)

        with pytest.raises(ValueError, match="missing option value: -o"):
            coerce_value(option, None)

    def test_bad_number(self):
        option = Option(long="count", type=OptionType.INT)

        with pytest.raises(ValueError, match="invalid int value for --count"):
            coerce_value(option, "many")

    @pytest.mark.parametrize("raw", ["garbage", "", "2"])
    def test_bad_bool(self, raw):
        option = Option(long="verbose")

        with pytest.raises(ValueError, match="invalid bool value for --verbose"):
            coerce_value(option, raw)


class TestDestinationSetter:
    def test_mapping_destination(self):
        dest: dict[str, object] = {}
        setter = DestinationSetter(dest)

        setter(Option(long="count", type=OptionType.INT), "3")

        assert dest == {"count": 3}

    def test_object_destination(self):
        dest = SimpleNamespace()
        setter = DestinationSetter(dest)

        setter(Option(short="v"), None)

        assert dest.v is True

    def test_parse_into_applies_defaults(self):
        ctx = create_context(
            "tool",
            [
                Option(short="v", long="verbose", default=False),
                Option(
                    short="n",
                    long="count",
                    requires_value=True,
                    type=OptionType.INT,
                    default=1,
                ),
                Option(long="name", requires_value=True, type=OptionType.STRING),
            ],
        )
        dest: dict[str, object] = {}

        extras, count = parse_into(ctx, ["tool", "-n", "5", "input.txt"], dest)

        assert dest == {"verbose": False, "count": 5, "name": None}
        assert extras == ["input.txt"]
        assert count == 1

    def test_conversion_failure_is_sink_rejection(self):
        ctx = create_context(
            "tool",
            [Option(short="n", requires_value=True, type=OptionType.INT)],
        )

        with pytest.raises(SinkRejectionError, match="invalid int value for -n"):
            parse(ctx, ["tool", "-n", "lots"], DestinationSetter({}))

    @pytest.mark.parametrize(
        ("argv", "flags"),
        [
            (["tool", "--verbose=garbage"], ContextFlags.NONE),
            (["tool", "-vgarbage"], ContextFlags.SLOPPY_SHORTS),
        ],
    )
    def test_unrecognized_bool_is_sink_rejection(self, argv, flags):
        ctx = create_context("tool", [Option(short="v", long="verbose")], flags)
        dest: dict[str, object] = {}

        with pytest.raises(SinkRejectionError, match="invalid bool value for"):
            parse(ctx, argv, DestinationSetter(dest))

        assert dest == {}
