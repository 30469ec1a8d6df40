"""Port interfaces for formatter collaborators.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from correlog.core.models import Correlation

AttributeTransformer = Callable[[dict[str, Any]], Mapping[str, Any]]


@runtime_checkable
class CorrelationProvider(Protocol):
    """Port for looking up the active trace.

    Examples: OpenTelemetryCorrelation, StaticCorrelation.
    """

    def current(self) -> Correlation | None:
        """Return the active correlation, or None when no trace is active."""
        ...


@runtime_checkable
class StackCleaner(Protocol):
    """Port for filtering stack frames before they are logged.

    Examples: PathStackCleaner.
    """

    def clean(self, frames: Sequence[str]) -> Sequence[str]:
        """Return the frames worth keeping, in order."""
        ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Port for reporting failures inside the formatter itself.

    Implementations must not write through the formatter they serve.
    """

    def report(self, message: str, exc: BaseException) -> None:
        """Report an internal failure."""
        ...


@runtime_checkable
class SerializableRecord(Protocol):
    """A domain object able to produce its own mapping representation."""

    def as_mapping(self) -> Mapping[Any, Any]:
        """Return the object as a mapping of attribute names to values."""
        ...
