from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "Fetching sensor data", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_keys_are_appended() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    line = formatter.format(_record(limit=5, start_date="2024-01-01", end_date=None))

    assert line == "Fetching sensor data | limit=5 start_date=2024-01-01"


def test_message_without_context_is_unchanged() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    assert formatter.format(_record()) == "Fetching sensor data"
