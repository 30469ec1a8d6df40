"""Correlation provider adapters.

OpenTelemetryCorrelation reads the trace id of the span active in the
current OpenTelemetry context. Environment, service and version are not
carried by spans, so they are fixed at construction.
"""

from opentelemetry import trace

from correlog.core.models import Correlation


class OpenTelemetryCorrelation:
    """CorrelationProvider backed by the OpenTelemetry context."""

    def __init__(self, env: str = "", service: str = "", version: str = "") -> None:
        self.env = env
        self.service = service
        self.version = version

    def current(self) -> Correlation | None:
        """Return the correlation of the current span, or None if not valid."""
        ctx = trace.get_current_span().get_span_context()
        if not ctx.is_valid:
            return None
        return Correlation(
            env=self.env,
            service=self.service,
            trace_id=trace.format_trace_id(ctx.trace_id),
            version=self.version,
        )


class StaticCorrelation:
    """CorrelationProvider returning a fixed correlation.

    Useful in tests and in batch jobs that run under a single trace.
    """

    def __init__(self, correlation: Correlation | None) -> None:
        self._correlation = correlation

    def current(self) -> Correlation | None:
        return self._correlation
