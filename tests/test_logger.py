"""Tests for the shared logging setup."""

from __future__ import annotations

import logging

from utils.logger import _LOG_FORMAT, get_logger


def test_get_logger_configures_root_once() -> None:
    get_logger("urbanbot.a")
    get_logger("urbanbot.b")

    ours = [
        h for h in logging.getLogger().handlers
        if h.formatter is not None and h.formatter._fmt == _LOG_FORMAT
    ]
    assert len(ours) == 1


def test_get_logger_keeps_httpx_quiet() -> None:
    get_logger(__name__)

    assert logging.getLogger("httpx").level == logging.WARNING
