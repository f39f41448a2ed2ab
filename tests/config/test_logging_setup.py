# topmark:header:start
#
#   project      : SymReport
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for SymReport's internal logging setup."""

from __future__ import annotations

import logging

import pytest

from symreport.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "raw,expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_installs_single_chalk_handler() -> None:
    try:
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_trace_level_is_registered() -> None:
    logger = get_logger("symreport.tests")

    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
    assert hasattr(logger, "trace")
