"""Formatter assembling log calls into single-line JSON records."""

from datetime import datetime
from typing import Any

from correlog.core.classify import as_payload, classify
from correlog.core.encoding.ndjson import encode_line, encode_record
from correlog.core.errors import enrich_error
from correlog.core.flatten import flatten_attributes, render_attributes
from correlog.core.models import ErrorBlock, GenericMessage, LogRecord, StructuredEvent
from correlog.core.ports import (
    AttributeTransformer,
    CorrelationProvider,
    DiagnosticSink,
    StackCleaner,
)
from correlog.core.text import safe_str
from correlog.core.timestamps import format_timestamp
from correlog.core.tracing import DEFAULT_SOURCE, tracing_fields


class Formatter:
    """Turns log calls into one-line JSON records.

    Formatting is total: any failure is reported to the diagnostic sink and
    a minimal fallback line holding status, timestamp and the unflattened
    message is returned instead. Instances hold no per-call state and can
    be shared across threads.

    Example:
        ```python
        formatter = Formatter()
        line = formatter.format_call(
            "INFO", datetime.now(UTC), StructuredEvent("hi", {"arr": [1, 2]})
        )
        # '{"message":"hi arr.0=1 arr.1=2","status":"INFO",...}\\n'
        ```
    """

    def __init__(
        self,
        correlation: CorrelationProvider | None = None,
        stack_cleaner: StackCleaner | None = None,
        attribute_transformer: AttributeTransformer | None = None,
        diagnostics: DiagnosticSink | None = None,
        source: str = DEFAULT_SOURCE,
    ) -> None:
        """Initialize the formatter with its collaborators.

        Args:
            correlation: Provider of the active trace (optional).
            stack_cleaner: Filter for error stack frames (optional).
            attribute_transformer: Function applied to the flattened
                attributes of each structured event (optional). It should
                change values only.
            diagnostics: Sink for formatter-internal failures (optional).
            source: Value of the "source" tracing field.

        Raises:
            TypeError: If attribute_transformer is given but not callable.
        """
        if attribute_transformer is not None and not callable(attribute_transformer):
            raise TypeError("attribute_transformer must be callable")
        self._correlation = correlation
        self._stack_cleaner = stack_cleaner
        self._attribute_transformer = attribute_transformer
        self._diagnostics = diagnostics
        self._source = source

    def __call__(self, severity: str, timestamp: datetime | float, msg: Any) -> str:
        return self.format_call(severity, timestamp, msg)

    def format_call(self, severity: str, timestamp: datetime | float, msg: Any) -> str:
        """Format one log call as a newline-terminated JSON line.

        Args:
            severity: Log level (e.g., "INFO", "ERROR").
            timestamp: Time of the call; datetime or Unix seconds.
            msg: A StructuredEvent, a GenericMessage, or any other value,
                which is treated as a generic message.

        Returns:
            One line of JSON. Never raises.
        """
        try:
            return encode_record(self.build_record(severity, timestamp, msg))
        except Exception as e:
            self._report("failed to format log call", e)
            return self._fallback(severity, timestamp, msg)

    def build_record(
        self, severity: str, timestamp: datetime | float, msg: Any
    ) -> LogRecord:
        """Assemble the LogRecord for a log call. May raise."""
        classified = classify(as_payload(msg))
        message = classified.prefix
        error: ErrorBlock | None = None

        if classified.structured:
            attributes, error = enrich_error(
                classified.attributes, self._stack_cleaner
            )
            rendered = self.format_attributes(attributes)
            message = f"{classified.prefix} {rendered}" if rendered else message

        return LogRecord(
            status=safe_str(severity),
            timestamp=format_timestamp(timestamp),
            message=message,
            error=error,
            tracing=tracing_fields(self._correlation, self._source, self._diagnostics),
        )

    def format_attributes(self, attributes: Any) -> str:
        """Flatten, transform and render event attributes."""
        flat = flatten_attributes(attributes)
        if not flat:
            return ""
        if self._attribute_transformer is not None:
            flat = dict(self._attribute_transformer(flat))
        return render_attributes(flat)

    def _fallback(self, severity: Any, timestamp: Any, msg: Any) -> str:
        # Built from strings only so that encoding cannot fail.
        try:
            ts = format_timestamp(timestamp)
        except Exception:
            ts = safe_str(timestamp)
        match msg:
            case StructuredEvent(event=None):
                message = ""
            case StructuredEvent(event=event):
                message = safe_str(event)
            case GenericMessage(message=raw):
                message = safe_str(raw)
            case _:
                message = safe_str(msg)
        return encode_line(
            {
                "message": message,
                "status": safe_str(severity),
                "timestamp": ts,
            }
        )

    def _report(self, message: str, exc: BaseException) -> None:
        if self._diagnostics is None:
            return
        try:
            self._diagnostics.report(message, exc)
        except Exception:
            pass
