"""Tests for logging formatters."""

import json
import logging
import sys

import pytest

from fare_engine.fare_logging import DevFormatter, JSONFormatter


@pytest.fixture
def log_record():
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg="Priced %s",
        args=("bike",),
        exc_info=None,
    )


@pytest.mark.unit
class TestJSONFormatter:
    def test_basic_output(self, log_record):
        data = json.loads(JSONFormatter().format(log_record))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Priced bike"
        assert data["env"] == "development"

    def test_includes_context_fields(self, log_record):
        log_record.vehicle_type = "bike"
        log_record.correlation_id = "corr-789"

        data = json.loads(JSONFormatter("production").format(log_record))

        assert data["vehicle_type"] == "bike"
        assert data["correlation_id"] == "corr-789"
        assert data["env"] == "production"

    def test_timestamp_from_record(self, log_record):
        log_record.created = 0

        data = json.loads(JSONFormatter().format(log_record))
        assert data["timestamp"] == "1970-01-01T00:00:00+00:00"

    def test_includes_exception(self, log_record):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log_record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(log_record))
        assert "RuntimeError: boom" in data["exception"]


@pytest.mark.unit
class TestDevFormatter:
    def test_output(self, log_record):
        output = DevFormatter().format(log_record)

        assert "INFO" in output
        assert "test.logger" in output
        assert "Priced bike" in output

    def test_appends_context_fields(self, log_record):
        log_record.vehicle_type = "auto"
        log_record.quote_id = "abc123"
        log_record.correlation_id = "-"

        output = DevFormatter().format(log_record)

        assert output.endswith("Priced bike [vehicle_type=auto quote_id=abc123]")

    def test_no_context_suffix_without_fields(self, log_record):
        assert DevFormatter().format(log_record).endswith("Priced bike")
