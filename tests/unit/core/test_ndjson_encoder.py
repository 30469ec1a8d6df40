"""Tests for NDJSON log record encoder."""

import json

import pytest

from correlog.core.encoding.ndjson import encode_record, encode_records, record_to_dict
from correlog.core.models import ErrorBlock, LogRecord


class TestNdjsonEncoder:
    """Tests for NDJSON encoding of log records."""

    @pytest.mark.encoding
    def test_encode_single_record(self) -> None:
        """Single LogRecord encodes to one JSON line."""
        record = LogRecord(
            status="INFO",
            timestamp="2019-10-19T00:00:00.000Z",
            message="Application started",
        )

        result = encode_record(record)

        parsed = json.loads(result.strip())
        assert parsed == {
            "message": "Application started",
            "status": "INFO",
            "timestamp": "2019-10-19T00:00:00.000Z",
        }

    @pytest.mark.encoding
    def test_output_ends_with_newline(self) -> None:
        """Each record ends with a newline character."""
        record = LogRecord(status="INFO", timestamp="t", message="Test")

        result = encode_record(record)

        assert result.endswith("\n")
        assert result.count("\n") == 1

    @pytest.mark.encoding
    def test_encode_record_with_error(self) -> None:
        """The error block is nested under "error"."""
        record = LogRecord(
            status="ERROR",
            timestamp="t",
            message="failed",
            error=ErrorBlock(kind="ValueError", message="bad", stack="a.py:1:in f"),
        )

        parsed = json.loads(encode_record(record))

        assert parsed["error"] == {
            "kind": "ValueError",
            "message": "bad",
            "stack": "a.py:1:in f",
        }

    @pytest.mark.encoding
    def test_tracing_fields_are_top_level(self) -> None:
        record = LogRecord(
            status="INFO",
            timestamp="t",
            message="m",
            tracing={"trace_id": "1", "service": "api"},
        )

        assert list(record_to_dict(record)) == [
            "message",
            "status",
            "timestamp",
            "trace_id",
            "service",
        ]

    @pytest.mark.encoding
    def test_multiline_message_stays_on_one_line(self) -> None:
        """Newlines inside values are escaped."""
        record = LogRecord(status="INFO", timestamp="t", message="a\nb")

        result = encode_record(record)

        assert result.count("\n") == 1
        assert json.loads(result)["message"] == "a\nb"

    @pytest.mark.encoding
    def test_non_ascii_is_escaped(self) -> None:
        record = LogRecord(status="INFO", timestamp="t", message="café")

        result = encode_record(record)

        assert result.isascii()
        assert json.loads(result)["message"] == "café"

    @pytest.mark.encoding
    def test_encode_multiple_records(self) -> None:
        """Multiple records are newline-delimited."""
        records = [
            LogRecord(status="INFO", timestamp="t", message="First"),
            LogRecord(status="ERROR", timestamp="t", message="Second"),
        ]

        lines = encode_records(records).strip().split("\n")

        assert len(lines) == 2
        assert json.loads(lines[0])["message"] == "First"
        assert json.loads(lines[1])["message"] == "Second"

    @pytest.mark.encoding
    def test_encode_empty_iterable(self) -> None:
        """Empty input returns empty string."""
        assert encode_records([]) == ""
