"""Tests for logging helpers."""

import logging
import os
from unittest.mock import patch

import pytest

from argscan.context import ContextFlags, create_context
from argscan.errors import UnknownOptionError
from argscan.helpers import (
    default_flag_names,
    log_debug,
    parse_bool,
    reload_config,
    send_log,
)
from argscan.options import Option
from argscan.parser import parse


@pytest.fixture
def logging_enabled():
    with patch.dict(os.environ, {"ARGSCAN_LOGGING_ENABLED": "1"}):
        reload_config()
        yield
    reload_config()


@pytest.fixture
def logging_disabled():
    with patch.dict(os.environ, {"ARGSCAN_LOGGING_ENABLED": "0"}):
        reload_config()
        yield
    reload_config()


class TestSendLog:
    def test_send_log_disabled(self, caplog, logging_disabled):
        """send_log does nothing when logging is disabled."""
        with caplog.at_level(logging.DEBUG):
            send_log("Test message")
            log_debug("Debug message")

        assert len(caplog.records) == 0

    def test_send_log_enabled(self, caplog, logging_enabled):
        with caplog.at_level(logging.DEBUG):
            log_debug("Debug message")
            send_log("Error message", level=logging.ERROR)

        assert [(r.levelname, r.message) for r in caplog.records] == [
            ("DEBUG", "Debug message"),
            ("ERROR", "Error message"),
        ]

    def test_send_log_custom_logger(self, caplog, logging_enabled):
        with caplog.at_level(logging.INFO):
            send_log("Custom logger message", logger_name="argscan.custom")

        assert len(caplog.records) == 1
        assert caplog.records[0].name == "argscan.custom"

    def test_parse_logs_failure(self, caplog, logging_enabled):
        ctx = create_context("tool", [Option(short="a")], ContextFlags.STRICT)

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(UnknownOptionError):
                parse(ctx, ["tool", "-b"], lambda option, value: None)

        messages = [r.message for r in caplog.records]
        assert any(m.startswith("Scanning 2 arguments for tool") for m in messages)
        assert any("tool: invalid argument: -b" in m for m in messages)


def test_default_flag_names():
    with patch.dict(os.environ, {"ARGSCAN_DEFAULT_FLAGS": "strict,keep-first"}):
        reload_config()
        names = default_flag_names()
    reload_config()

    assert names == ["strict", "keep-first"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", True),
        ("yes", True),
        ("on", True),
        ("anything", True),
        ("0", False),
        ("no", False),
        ("OFF", False),
        ("", False),
        (None, False),
    ],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), (" Y ", True), ("On", True), ("false", False), ("0", False)],
)
def test_parse_bool_strict(raw, expected):
    assert parse_bool(raw, strict=True) is expected


@pytest.mark.parametrize("raw", ["garbage", "", "2"])
def test_parse_bool_strict_rejects(raw):
    with pytest.raises(ValueError, match="not a boolean"):
        parse_bool(raw, strict=True)
