"""NDJSON encoder for log records."""

import json
from collections.abc import Iterable
from typing import Any

from correlog.core.models import LogRecord


def record_to_dict(record: LogRecord) -> dict[str, Any]:
    """Convert a LogRecord to its JSON object form.

    Field order is message, error, status, timestamp, then the tracing
    fields. The error key is omitted when the record has no error.
    """
    obj: dict[str, Any] = {"message": record.message}
    if record.error is not None:
        obj["error"] = {
            "kind": record.error.kind,
            "message": record.error.message,
            "stack": record.error.stack,
        }
    obj["status"] = record.status
    obj["timestamp"] = record.timestamp
    obj.update(record.tracing)
    return obj


def encode_line(obj: dict[str, Any]) -> str:
    """Encode one JSON object as a newline-terminated line."""
    return json.dumps(obj, separators=(",", ":")) + "\n"


def encode_record(record: LogRecord) -> str:
    """Encode a log record to a single newline-terminated JSON line.

    Args:
        record: The record to encode.

    Returns:
        One line of JSON ending with a newline character.
    """
    return encode_line(record_to_dict(record))


def encode_records(records: Iterable[LogRecord]) -> str:
    """Encode log records to newline-delimited JSON.

    Args:
        records: An iterable of LogRecord objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    return "".join(encode_record(record) for record in records)
