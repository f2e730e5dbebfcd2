# topmark:header:start
#
#   project      : Tailor
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-capable logging setup."""

from __future__ import annotations

import logging

import pytest

from tailor.config import logging as tailor_logging
from tailor.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    TailorLogger,
    get_logger,
    resolve_env_log_level,
)
from tailor.resources import Item
from tailor.scope import StaticScope
from tests.fakes import identity_callback


def test_get_logger_returns_trace_capable_logger() -> None:
    """Loggers created through get_logger expose trace()."""
    logger = get_logger("tailor.tests.sample")

    assert isinstance(logger, TailorLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("15", 15),
        ("nonsense", None),
    ],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    """TAILOR_LOG_LEVEL accepts level names (any case) and numbers."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)

    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    """Without the variable no level is forced."""
    assert resolve_env_log_level() is None


def test_pipeline_decisions_logged_at_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Stripped keys are reported at TRACE level."""
    caplog.set_level(TRACE_LEVEL, logger="tailor.resources.base")

    Item({}, identity_callback).process_item(StaticScope.of(excludes={"pw"}), {"pw": 1, "id": 2})

    traces: list[logging.LogRecord] = [r for r in caplog.records if r.levelno == TRACE_LEVEL]
    assert any("pw" in r.getMessage() for r in traces)
    assert all(r.levelno < logging.WARNING for r in caplog.records)


def test_setup_logging_replaces_handlers() -> None:
    """Repeated setup leaves exactly one root handler."""
    tailor_logging.setup_logging(level=logging.INFO)
    tailor_logging.setup_logging(level=TRACE_LEVEL)

    root: logging.Logger = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, tailor_logging.ChalkFormatter)
    assert root.level == TRACE_LEVEL
