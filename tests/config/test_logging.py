# topmark:header:start
#
#   project      : Seti Icons
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Seti Icons contributors
#
# topmark:header:end

"""Tests for logging level resolution from the environment."""

from __future__ import annotations

import logging

import pytest

from seti_icons.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("WARN", logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names (any case) and numbers are accepted."""
    monkeypatch.setenv(LOG_LEVEL_ENV, value)

    assert resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    """No variable means no level."""
    assert resolve_env_log_level() is None


def test_trace_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Project loggers have a `trace` method below DEBUG."""
    logger = get_logger("seti_icons.tests")

    with caplog.at_level(TRACE_LEVEL, logger="seti_icons.tests"):
        logger.trace("tier %s", "exact")

    assert caplog.records[-1].levelno == TRACE_LEVEL
    assert caplog.records[-1].getMessage() == "tier exact"


def test_chalk_formatter_keeps_message() -> None:
    """Formatting colors the line but keeps the text."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

    assert "careful" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)
