"""Core domain models for log formatting."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StructuredEvent:
    """A named occurrence carrying contextual attributes.

    Attributes:
        event: Event name (e.g., "order.placed"). May be None.
        attributes: Mapping of keys to nested values. Owned by the caller,
            never mutated by the formatter.
    """

    event: str | None = None
    attributes: Mapping[Any, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenericMessage:
    """A free-form log message."""

    message: Any


Payload = StructuredEvent | GenericMessage


@dataclass(frozen=True)
class Correlation:
    """Identifiers of the active trace.

    Attributes:
        env: Deployment environment (e.g., "production").
        service: Service name.
        trace_id: Identifier of the active trace.
        version: Deployed service version.
    """

    env: str
    service: str
    trace_id: str
    version: str


@dataclass(frozen=True)
class ErrorBlock:
    """Top-level structured error of a log record."""

    kind: str
    message: str
    stack: str


@dataclass(frozen=True)
class LogRecord:
    """A formatted log record, ready for encoding.

    Attributes:
        status: Severity of the log call (e.g., INFO, ERROR).
        timestamp: UTC ISO-8601 timestamp with millisecond precision.
        message: Event prefix followed by the flattened attributes.
        error: Structured error, present when an error attribute was found.
        tracing: Correlation fields; either empty or all five present.
    """

    status: str
    timestamp: str
    message: str
    error: ErrorBlock | None = None
    tracing: dict[str, str] = field(default_factory=dict)
