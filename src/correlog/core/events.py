"""Helper functions for creating StructuredEvent objects."""

import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from correlog.core.models import StructuredEvent


@dataclass
class TimedEventResult:
    """Result object for timed_event context manager."""

    events: list[StructuredEvent] = field(default_factory=list)


def event(name: str | None, **attributes: Any) -> StructuredEvent:
    """Create a structured event.

    Args:
        name: The event name (e.g., "order.placed")
        **attributes: Contextual attributes, may be nested

    Returns:
        StructuredEvent with the given name and attributes
    """
    return StructuredEvent(event=name, attributes=dict(attributes))


@contextmanager
def timed_event(name: str, **attributes: Any) -> Generator[TimedEventResult]:
    """Context manager that records start and finish events with elapsed time.

    Args:
        name: The event name
        **attributes: Contextual attributes added to both events

    Yields:
        TimedEventResult holding the start event, and the finish event once
        the block exits
    """
    result = TimedEventResult()
    start = time.perf_counter()
    result.events.append(StructuredEvent(name, {"phase": "start", **attributes}))
    yield result
    elapsed = time.perf_counter() - start
    result.events.append(
        StructuredEvent(
            name, {"phase": "finish", "elapsed_seconds": elapsed, **attributes}
        )
    )
