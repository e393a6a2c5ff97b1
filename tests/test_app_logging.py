"""Tests for logging configuration."""

import logging
from datetime import date
from uuid import uuid4

import pytest

from nutrition_diary.app_logging import LOGGER_NAME, configure_logging
from nutrition_diary.services.entries import DailyEntryService
from tests.conftest import InMemoryEntryStore, make_entry


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("DEBUG")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG


def test_delete_logs_recomputed_streak(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    service = DailyEntryService(InMemoryEntryStore())
    user_id = uuid4()
    try:
        service.save_entry(user_id, make_entry(date(2024, 5, 1)))
        service.save_entry(user_id, make_entry(date(2024, 5, 2)))
        service.delete_entry(user_id, date(2024, 5, 2))
    finally:
        logger.removeHandler(caplog.handler)

    messages = [record.getMessage() for record in caplog.records]
    assert any(
        "Saved entry" in message and "streak=2" in message for message in messages
    )
    assert any(
        "Recomputed streak" in message and "last_date=2024-05-01" in message
        for message in messages
    )
