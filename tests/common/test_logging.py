from __future__ import annotations

import logging

import pytest

from hydralist.common.logging import logging_callback


def test_logging_callback_maps_levels(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("hydralist.test")
    emit = logging_callback(logger)

    with caplog.at_level(logging.INFO, logger="hydralist.test"):
        emit("info", "fetching")
        emit("note", "trimming description")
        emit("warn", "user/foo is missing")

    levels = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert levels == [
        (logging.INFO, "info: fetching"),
        (logging.INFO, "note: trimming description"),
        (logging.WARNING, "warn: user/foo is missing"),
    ]
