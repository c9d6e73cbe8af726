"""Tests for component loggers and the correlation-id aware formatter."""

import logging

from messenger.config.logging_config import (
    CorrelationIdFilter,
    SafeFormatter,
    component_logger,
    correlation_id_var,
)


def test_component_logger_tags_records(caplog):
    logger = component_logger("UserService")

    with caplog.at_level(logging.INFO, logger="messenger"):
        logger.info("hello")

    [record] = [r for r in caplog.records if r.getMessage() == "hello"]
    assert record.name == "messenger.UserService"
    assert record.component == "UserService"


def test_formatter_prints_component_and_correlation_id():
    record = logging.LogRecord(
        "messenger.ChatService", logging.INFO, __file__, 1, "chat created", None, None
    )
    record.component = "ChatService"
    token = correlation_id_var.set("req-42")
    try:
        CorrelationIdFilter().filter(record)
    finally:
        correlation_id_var.reset(token)

    line = SafeFormatter("[%(component)s] [%(correlation_id)s] %(message)s").format(record)

    assert line == "[ChatService] [req-42] chat created"


def test_formatter_fills_missing_fields():
    record = logging.LogRecord("uvicorn", logging.INFO, __file__, 1, "up", None, None)

    line = SafeFormatter("[%(component)s] [%(correlation_id)s] %(message)s").format(record)

    assert line == "[uvicorn] [NO Correlation ID] up"


async def test_conflicts_are_logged(facade, caplog):
    await facade.register_user("alice")

    with caplog.at_level(logging.INFO, logger="messenger"):
        await facade.register_user("alice")

    assert any(
        getattr(r, "component", None) == "UserService" and "already taken" in r.getMessage()
        for r in caplog.records
    )
