# topmark:header:start
#
#   project      : TypeBinder
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging layer: TRACE level, level parsing and formatting."""

from __future__ import annotations

import logging

import pytest
from yachalk import chalk

from typebinder.config.logging import (
    DEBUG_LOG_FORMAT,
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    TypeBinderLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from typebinder.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("15", 15),
        ("bogus", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Level names are case-insensitive; digits are taken verbatim."""
    assert parse_log_level(value) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable selects the level when set."""
    assert resolve_env_log_level() is None

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "trace")
    assert resolve_env_log_level() == TRACE_LEVEL

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "")
    assert resolve_env_log_level() is None


def test_trace_level_is_registered() -> None:
    """TRACE sits below DEBUG and has a level name."""
    assert TRACE_LEVEL == logging.DEBUG - 5
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_typebinder_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Package loggers expose trace()."""
    logger = get_logger("typebinder.tests.sample")
    assert isinstance(logger, TypeBinderLogger)

    with caplog.at_level(TRACE_LEVEL, logger="typebinder.tests.sample"):
        logger.trace("hello %s", "trace")

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "hello trace")]


def test_setup_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit level, the environment decides (default CRITICAL)."""
    root = logging.getLogger()
    try:
        setup_logging()
        assert root.level == logging.CRITICAL

        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
        setup_logging()
        assert root.level == logging.DEBUG
        (handler,) = root.handlers
        assert isinstance(handler.formatter, ChalkFormatter)
        assert handler.formatter._fmt == DEBUG_LOG_FORMAT  # pyright: ignore[reportPrivateUsage]

        setup_logging(logging.WARNING)
        (handler,) = root.handlers
        assert handler.formatter._fmt == LOG_FORMAT  # pyright: ignore[reportPrivateUsage,reportOptionalMemberAccess]
    finally:
        setup_logging(TRACE_LEVEL)


@pytest.mark.parametrize(
    ("level", "style"),
    [
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    ],
)
def test_chalk_formatter_colors_by_level(level: int, style: object) -> None:
    """Each severity gets its own color."""
    formatter = ChalkFormatter(LOG_FORMAT)
    record = logging.LogRecord("x", level, __file__, 1, "message", None, None)

    expected = style(f"[{logging.getLevelName(level)}] message")  # type: ignore[operator]
    assert formatter.format(record) == expected
