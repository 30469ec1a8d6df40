"""UTC timestamp rendering."""

from datetime import UTC, datetime
from typing import Any


def to_utc(timestamp: datetime | float) -> datetime:
    """Convert a timestamp to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC; numbers are Unix
    timestamps in seconds.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=UTC)
        return timestamp.astimezone(UTC)
    if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
        raise TypeError(f"unsupported timestamp type: {type(timestamp).__name__}")
    return datetime.fromtimestamp(timestamp, tz=UTC)


def format_timestamp(timestamp: Any) -> str:
    """Render a timestamp as ISO-8601 UTC with millisecond precision.

    Example:
        ```python
        format_timestamp(datetime(2019, 10, 19, tzinfo=UTC))
        # "2019-10-19T00:00:00.000Z"
        ```
    """
    utc = to_utc(timestamp).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"
