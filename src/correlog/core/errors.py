"""Detection and rendering of error attributes."""

import builtins
import traceback
from collections.abc import Mapping
from typing import Any

from correlog.core.models import ErrorBlock
from correlog.core.ports import StackCleaner
from correlog.core.text import safe_str

ERROR_KEY = "error"


def error_kind(error: BaseException) -> str:
    """Return the class name of an error, module-qualified unless builtin."""
    cls = type(error)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def error_message(error: BaseException) -> str:
    """Return the message of an error.

    str() of a KeyError quotes its argument; the unquoted argument is
    returned instead. Errors with their own __str__ keep it.
    """
    text = safe_str(error)
    if len(error.args) == 1 and isinstance(error.args[0], str):
        if text == repr(error.args[0]):
            return error.args[0]
    return text


def stack_frames(error: BaseException) -> list[str]:
    """Render the traceback of an error as "path:lineno:in name" lines."""
    return [
        f"{frame.filename}:{frame.lineno}:in {frame.name}"
        for frame in traceback.extract_tb(error.__traceback__)
    ]


def clean_stack(frames: list[str], cleaner: StackCleaner | None) -> list[str]:
    """Filter frames through the cleaner, passing them through on failure."""
    if cleaner is None:
        return frames
    try:
        return list(cleaner.clean(frames))
    except Exception:
        return frames


def enrich_error(
    attributes: Mapping[Any, Any], cleaner: StackCleaner | None = None
) -> tuple[Mapping[Any, Any], ErrorBlock | None]:
    """Replace an error attribute with its shallow form.

    When attributes hold an exception under the "error" key, the returned
    attributes are a copy where that exception is replaced by
    {"class": kind, "message": text}, so it flattens inline as
    error.class=... error.message=...

    Args:
        attributes: Top-level event attributes. Never mutated.
        cleaner: Stack cleaner applied to the traceback frames.

    Returns:
        Tuple of (attributes, error block). The block is None and the
        attributes are returned as-is when no error attribute was found.
    """
    if not isinstance(attributes, Mapping):
        return attributes, None
    error = attributes.get(ERROR_KEY)
    if not isinstance(error, BaseException):
        return attributes, None

    kind = error_kind(error)
    message = error_message(error)
    substituted = dict(attributes)
    substituted[ERROR_KEY] = {"class": kind, "message": message}

    stack = "\n".join(clean_stack(stack_frames(error), cleaner))
    return substituted, ErrorBlock(kind=kind, message=message, stack=stack)
