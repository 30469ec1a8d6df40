"""Python logging adapters for correlog.

CorrelogFormatter bridges the standard library logging module to the core
Formatter, so any handler can emit one JSON line per record.
LoggingDiagnosticSink reports failures inside the formatter on a separate
logger that never goes through that formatter.
"""

import logging
import sys
from collections.abc import Mapping

from correlog.core.errors import ERROR_KEY
from correlog.core.formatter import Formatter
from correlog.core.models import StructuredEvent
from correlog.core.text import safe_str

DIAGNOSTICS_LOGGER = "correlog.diagnostics"


class LoggingDiagnosticSink:
    """DiagnosticSink writing to a dedicated, non-propagating logger.

    The logger gets its own stderr handler with a plain text format, so
    diagnostics never recurse into the JSON formatter.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        if logger is None:
            logger = logging.getLogger(DIAGNOSTICS_LOGGER)
            logger.propagate = False
            if not logger.handlers:
                handler = logging.StreamHandler(sys.stderr)
                handler.setFormatter(
                    logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
                )
                logger.addHandler(handler)
        self.logger = logger

    def report(self, message: str, exc: BaseException) -> None:
        """Log the failure with its traceback at ERROR level."""
        self.logger.error(message, exc_info=(type(exc), exc, exc.__traceback__))


class CorrelogFormatter(logging.Formatter):
    """Logging formatter that writes records as correlog JSON lines.

    An exception on a structured event becomes its error attribute. On a
    plain message the formatted traceback is appended to the message text.

    Example:
        ```python
        handler = logging.StreamHandler()
        handler.setFormatter(CorrelogFormatter())
        logging.getLogger().addHandler(handler)

        logging.getLogger(__name__).info(event("order.placed", order={"id": 42}))
        # {"message":"order.placed order.id=42","status":"INFO",...}
        ```
    """

    def __init__(self, formatter: Formatter | None = None) -> None:
        """Initialize with the core formatter to delegate to.

        Args:
            formatter: Core formatter. Defaults to one without tracing that
                reports failures to a LoggingDiagnosticSink.
        """
        super().__init__()
        self.formatter = formatter or Formatter(diagnostics=LoggingDiagnosticSink())

    def format(self, record: logging.LogRecord) -> str:
        """Format the record as one JSON line, without trailing newline.

        Args:
            record: The log record to format.
        """
        msg = record.msg
        if isinstance(msg, StructuredEvent):
            msg = _attach_exception(msg, record)
        else:
            try:
                msg = record.getMessage()
            except (TypeError, ValueError):
                # Mismatched %-args; log the unformatted message.
                msg = record.msg
            if record.exc_info:
                # Cached on the record, as logging.Formatter does.
                if not record.exc_text:
                    record.exc_text = self.formatException(record.exc_info)
                msg = f"{safe_str(msg)}\n{record.exc_text}"
        line = self.formatter.format_call(record.levelname, record.created, msg)
        # Handlers append their own terminator.
        return line.rstrip("\n")


def _attach_exception(
    event: StructuredEvent, record: logging.LogRecord
) -> StructuredEvent:
    """Add the record's exception as the event's error attribute if absent."""
    if not record.exc_info or not isinstance(event.attributes, Mapping):
        return event
    exc = record.exc_info[1]
    if exc is None or ERROR_KEY in event.attributes:
        return event
    return StructuredEvent(event.event, {**event.attributes, ERROR_KEY: exc})
