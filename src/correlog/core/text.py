"""String conversion that never raises."""

from typing import Any


def safe_str(value: Any) -> str:
    """Convert a value to its string form without raising.

    Falls back to repr(), then to a placeholder naming the type, when a
    value's __str__ fails.

    Args:
        value: Any object.

    Returns:
        The string form of the value.
    """
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"
