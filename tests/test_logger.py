from __future__ import annotations

import logging

import pytest

from casekit.logger import TRACE, AppLogger, determine_level, logger, setup_logger


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("debug", logging.DEBUG),
        ("TRACE", TRACE),
        (" warning ", logging.WARNING),
        ("", logging.INFO),
        ("verbose", logging.INFO),
    ],
)
def test_determine_level(raw, expected):
    assert determine_level(raw) == expected


def test_setup_logger_is_idempotent():
    assert isinstance(logger, AppLogger)
    before = len(logger.handlers)
    assert setup_logger("casekit") is logger
    assert len(logger.handlers) == before
    assert sum(type(h) is logging.StreamHandler for h in logger.handlers) == 2


def test_error_raise_logs_then_raises(caplog):
    logger.addHandler(caplog.handler)
    try:
        with pytest.raises(ValueError, match="boom"):
            logger.error_raise("boom", exc=ValueError)
        with pytest.raises(RuntimeError):
            logger.error_raise("no exc given")
    finally:
        logger.removeHandler(caplog.handler)
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert messages == ["boom", "no exc given"]


def test_trace_respects_level(caplog):
    logger.addHandler(caplog.handler)
    previous = logger.level
    try:
        logger.setLevel(TRACE)
        logger.trace("visible %s", "trace")
        logger.setLevel(logging.INFO)
        logger.trace("hidden")
    finally:
        logger.setLevel(previous)
        logger.removeHandler(caplog.handler)
    assert [r.getMessage() for r in caplog.records] == ["visible trace"]
    assert caplog.records[0].levelname == "TRACE"
