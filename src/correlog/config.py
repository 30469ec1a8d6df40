"""Formatter configuration and wiring."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from correlog.adapters.logging import LoggingDiagnosticSink
from correlog.adapters.stack import PathStackCleaner
from correlog.adapters.tracing import OpenTelemetryCorrelation
from correlog.core.formatter import Formatter
from correlog.core.ports import AttributeTransformer, DiagnosticSink
from correlog.core.tracing import DEFAULT_SOURCE


@dataclass(frozen=True)
class FormatterConfig:
    """Settings for building a Formatter.

    Attributes:
        env: Deployment environment reported with traces.
        service: Service name reported with traces.
        version: Service version reported with traces.
        source: Value of the "source" field.
        stack_root: Path prefix stripped from stack frames.
        stack_silencers: Substrings of stack frames to drop. None keeps the
            PathStackCleaner defaults.
    """

    env: str = ""
    service: str = ""
    version: str = ""
    source: str = DEFAULT_SOURCE
    stack_root: str | None = None
    stack_silencers: tuple[str, ...] | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FormatterConfig":
        """Load settings from environment variables.

        Reads DD_ENV, DD_SERVICE, DD_VERSION, CORRELOG_SOURCE,
        CORRELOG_STACK_ROOT and CORRELOG_STACK_SILENCERS (comma-separated).

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        if environ is None:
            environ = os.environ
        silencers = environ.get("CORRELOG_STACK_SILENCERS")
        return cls(
            env=environ.get("DD_ENV", ""),
            service=environ.get("DD_SERVICE", ""),
            version=environ.get("DD_VERSION", ""),
            source=environ.get("CORRELOG_SOURCE") or DEFAULT_SOURCE,
            stack_root=environ.get("CORRELOG_STACK_ROOT") or None,
            stack_silencers=(
                None
                if silencers is None
                else tuple(s.strip() for s in silencers.split(",") if s.strip())
            ),
        )


def build_formatter(
    config: FormatterConfig | None = None,
    attribute_transformer: AttributeTransformer | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> Formatter:
    """Build a Formatter wired to OpenTelemetry and a path stack cleaner.

    Args:
        config: Settings. Defaults to FormatterConfig.from_env().
        attribute_transformer: Function applied to flattened attributes.
        diagnostics: Sink for internal failures. Defaults to
            LoggingDiagnosticSink.

    Returns:
        A configured Formatter.
    """
    if config is None:
        config = FormatterConfig.from_env()
    return Formatter(
        correlation=OpenTelemetryCorrelation(
            env=config.env, service=config.service, version=config.version
        ),
        stack_cleaner=PathStackCleaner(
            root=config.stack_root, silencers=config.stack_silencers
        ),
        attribute_transformer=attribute_transformer,
        diagnostics=diagnostics or LoggingDiagnosticSink(),
        source=config.source,
    )
