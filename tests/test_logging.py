"""Tests for logging setup."""

import json
import logging
import sys

import pytest

from querylet.utils.logging import (
    StandardFormatter,
    StructuredFormatter,
    get_report_logger,
    setup_logging,
)


@pytest.fixture
def basic_config(monkeypatch):
    """Capture logging.basicConfig arguments instead of touching the root logger."""
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    return calls


def test_structured_formatter_emits_json():
    """Structured records carry level, logger and message."""
    record = logging.LogRecord(
        "querylet.query", logging.WARNING, __file__, 10, "unknown output type: xml",
        None, None,
    )

    data = json.loads(StructuredFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "querylet.query"
    assert data["message"] == "unknown output type: xml"


def test_setup_logging_console_on_stderr(basic_config):
    """Console logs go to stderr so stdout only carries report output."""
    setup_logging(level="info")

    handlers = basic_config["handlers"]
    assert basic_config["level"] == logging.INFO
    assert basic_config["force"] is True
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert isinstance(handlers[0].formatter, StandardFormatter)


def test_setup_logging_structured_with_file(basic_config, tmp_path):
    """A log file adds a second handler sharing the formatter."""
    log_file = tmp_path / "querylet.log"

    setup_logging(level="DEBUG", structured=True, log_file=str(log_file))

    handlers = basic_config["handlers"]
    assert len(handlers) == 2
    assert isinstance(handlers[1], logging.FileHandler)
    assert isinstance(handlers[1].formatter, StructuredFormatter)
    handlers[1].close()


def test_setup_logging_unknown_level(basic_config):
    """Unknown level names fall back to WARNING."""
    setup_logging(level="chatty")

    assert basic_config["level"] == logging.WARNING


def test_report_logger_tags_records(caplog):
    """Report loggers prefix messages and attach the report context."""
    logger = get_report_logger("querylet.test", "reports/drinks.sql", datasource="duck")

    with caplog.at_level(logging.INFO, logger="querylet.test"):
        logger.info("Report written")

    record = caplog.records[0]
    assert record.getMessage() == "[drinks] Report written"
    assert record.report == {
        "name": "drinks",
        "query_file": "reports/drinks.sql",
        "datasource": "duck",
    }


def test_structured_formatter_includes_report(caplog):
    """The JSON record carries the report context."""
    logger = get_report_logger("querylet.test", "drinks.sql")

    with caplog.at_level(logging.WARNING, logger="querylet.test"):
        logger.warning("no rows")

    data = json.loads(StructuredFormatter().format(caplog.records[0]))
    assert data["message"] == "[drinks] no rows"
    assert data["report"] == {"name": "drinks", "query_file": "drinks.sql"}
