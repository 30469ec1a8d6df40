"""Tracing correlation fields."""

from correlog.core.models import Correlation
from correlog.core.ports import CorrelationProvider, DiagnosticSink

DEFAULT_SOURCE = "python"


def correlation_fields(correlation: Correlation, source: str) -> dict[str, str]:
    """Render a correlation as the five log record tracing fields."""
    return {
        "env": str(correlation.env),
        "service": str(correlation.service),
        "source": source,
        "trace_id": str(correlation.trace_id),
        "version": str(correlation.version),
    }


def tracing_fields(
    provider: CorrelationProvider | None,
    source: str = DEFAULT_SOURCE,
    diagnostics: DiagnosticSink | None = None,
) -> dict[str, str]:
    """Query the active trace and return its correlation fields.

    Args:
        provider: Correlation provider. None means tracing is not set up.
        source: Value of the "source" field, naming the logging runtime.
        diagnostics: Where a failing provider is reported.

    Returns:
        Either exactly {env, service, source, trace_id, version} or {}
        when no trace is active or the provider fails.
    """
    if provider is None:
        return {}
    try:
        correlation = provider.current()
        if correlation is None:
            return {}
        return correlation_fields(correlation, source)
    except Exception as e:
        if diagnostics is not None:
            diagnostics.report("correlation lookup failed", e)
        return {}
