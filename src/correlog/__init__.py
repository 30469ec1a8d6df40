"""correlog: structured, trace-correlated JSON log lines."""

from correlog.adapters.logging import CorrelogFormatter, LoggingDiagnosticSink
from correlog.adapters.stack import PathStackCleaner
from correlog.adapters.tracing import OpenTelemetryCorrelation, StaticCorrelation
from correlog.config import FormatterConfig, build_formatter
from correlog.core.events import event, timed_event
from correlog.core.flatten import flatten_attributes
from correlog.core.formatter import Formatter
from correlog.core.models import (
    Correlation,
    ErrorBlock,
    GenericMessage,
    LogRecord,
    StructuredEvent,
)

__version__ = "0.1.0"

__all__ = [
    "Correlation",
    "CorrelogFormatter",
    "ErrorBlock",
    "FormatterConfig",
    "Formatter",
    "GenericMessage",
    "LogRecord",
    "LoggingDiagnosticSink",
    "OpenTelemetryCorrelation",
    "PathStackCleaner",
    "StaticCorrelation",
    "StructuredEvent",
    "build_formatter",
    "event",
    "flatten_attributes",
    "timed_event",
]
