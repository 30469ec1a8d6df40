"""BDD step definitions for formatter features."""

import builtins
import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from correlog.adapters.tracing import StaticCorrelation
from correlog.core.formatter import Formatter
from correlog.core.models import Correlation, StructuredEvent
from correlog.core.ports import AttributeTransformer


class _RecordingSink:
    def __init__(self) -> None:
        self.reports: list[tuple[str, BaseException]] = []

    def report(self, message: str, exc: BaseException) -> None:
        self.reports.append((message, exc))


@dataclass
class FormatterScenarioContext:
    """State shared between the steps of one scenario."""

    correlation: Correlation | None = None
    transformer: AttributeTransformer | None = None
    diagnostics: _RecordingSink = field(default_factory=_RecordingSink)
    line: str = ""

    def formatter(self) -> Formatter:
        return Formatter(
            correlation=StaticCorrelation(self.correlation),
            attribute_transformer=self.transformer,
            diagnostics=self.diagnostics,
        )

    def log(self, severity: str, msg: Any) -> None:
        self.line = self.formatter().format_call(
            severity, datetime(2019, 10, 19, tzinfo=UTC), msg
        )

    @property
    def record(self) -> dict[str, Any]:
        result: dict[str, Any] = json.loads(self.line)
        return result


@pytest.fixture
def ctx() -> FormatterScenarioContext:
    """Fresh scenario context for each test."""
    return FormatterScenarioContext()


# === Given ===
@given(parsers.parse('a formatter with an active trace for service "{service}"'))
def step_active_trace(ctx: FormatterScenarioContext, service: str) -> None:
    ctx.correlation = Correlation(env="test", service=service, trace_id="1", version="")


@given("the formatter upper-cases attribute values")
def step_upcase_transformer(ctx: FormatterScenarioContext) -> None:
    ctx.transformer = lambda attrs: {k: str(v).upper() for k, v in attrs.items()}


@given("the formatter has a failing attribute transformer")
def step_failing_transformer(ctx: FormatterScenarioContext) -> None:
    def broken(attrs: dict[str, Any]) -> dict[str, Any]:
        raise RuntimeError("transformer bug")

    ctx.transformer = broken


# === When ===
@when(parsers.parse('"{severity}" is logged with the message "{message}"'))
def step_log_message(ctx: FormatterScenarioContext, severity: str, message: str) -> None:
    ctx.log(severity, message)


@when(parsers.parse('"{severity}" is logged with event "{name}" and attributes:'))
def step_log_event(
    ctx: FormatterScenarioContext, severity: str, name: str, docstring: str
) -> None:
    ctx.log(severity, StructuredEvent(name, json.loads(docstring)))


@when(
    parsers.parse(
        '"{severity}" is logged with event "{name}" and error "{kind}: {message}"'
    )
)
def step_log_error(
    ctx: FormatterScenarioContext, severity: str, name: str, kind: str, message: str
) -> None:
    error = getattr(builtins, kind)(message)
    ctx.log(severity, StructuredEvent(name, {"error": error}))


# === Then ===
@then("the line is valid JSON")
def step_valid_json(ctx: FormatterScenarioContext) -> None:
    assert ctx.line.endswith("\n")
    assert isinstance(json.loads(ctx.line), dict)


@then(parsers.parse('the record {field_name} is "{value}"'))
def step_record_field(ctx: FormatterScenarioContext, field_name: str, value: str) -> None:
    assert ctx.record[field_name] == value


@then(parsers.parse('the error block {field_name} is "{value}"'))
def step_record_error_field(
    ctx: FormatterScenarioContext, field_name: str, value: str
) -> None:
    assert ctx.record["error"][field_name] == value


@then(parsers.parse('the record has tracing fields for service "{service}"'))
def step_tracing_fields(ctx: FormatterScenarioContext, service: str) -> None:
    record = ctx.record
    assert record["service"] == service
    assert record["source"] == "python"
    assert {"env", "trace_id", "version"} <= set(record)


@then("one formatter failure was reported")
def step_failure_reported(ctx: FormatterScenarioContext) -> None:
    assert len(ctx.diagnostics.reports) == 1
