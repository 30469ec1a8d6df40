"""Shared test fixtures for all test modules."""

import json
from datetime import UTC, datetime
from typing import Any

import pytest

from correlog.adapters.tracing import StaticCorrelation
from correlog.core.formatter import Formatter
from correlog.core.models import Correlation


class RecordingDiagnosticSink:
    """DiagnosticSink that keeps reported failures in memory."""

    def __init__(self) -> None:
        self.reports: list[tuple[str, BaseException]] = []

    def report(self, message: str, exc: BaseException) -> None:
        self.reports.append((message, exc))


@pytest.fixture
def time_2019() -> datetime:
    """The fixed timestamp used by formatter tests."""
    return datetime(2019, 10, 19, tzinfo=UTC)


@pytest.fixture
def correlation() -> Correlation:
    """Correlation of a trace started by the test suite."""
    return Correlation(env="", service="pytest", trace_id="0", version="")


@pytest.fixture
def meta() -> dict[str, str]:
    """Tracing fields expected for the correlation fixture."""
    return {
        "env": "",
        "service": "pytest",
        "source": "python",
        "trace_id": "0",
        "version": "",
    }


@pytest.fixture
def diagnostics() -> RecordingDiagnosticSink:
    """In-memory diagnostic sink."""
    return RecordingDiagnosticSink()


@pytest.fixture
def formatter(
    correlation: Correlation, diagnostics: RecordingDiagnosticSink
) -> Formatter:
    """Formatter with an active trace and an in-memory diagnostic sink."""
    return Formatter(
        correlation=StaticCorrelation(correlation), diagnostics=diagnostics
    )


@pytest.fixture
def parse_line():
    """Factory fixture that parses one formatted line.

    Asserts the line is newline-terminated and holds exactly one line.
    """

    def _parse(line: str) -> dict[str, Any]:
        assert line.endswith("\n")
        assert "\n" not in line[:-1]
        result: dict[str, Any] = json.loads(line)
        return result

    return _parse
