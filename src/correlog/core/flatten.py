"""Flattening of nested attributes into dotted keys.

Given an input of
    {"foo": "bar", "baz": {"qux": "quux"}, "arr": [1, 2]}
flatten_attributes returns
    {"foo": "bar", "baz.qux": "quux", "arr.0": 1, "arr.1": 2}
"""

from collections.abc import Mapping
from typing import Any

from correlog.core.ports import SerializableRecord
from correlog.core.text import safe_str

KEY_SEPARATOR = "."
NODE_KEY = "node"
RECORD_KEY = "record"
CYCLE_MARKER = "<cycle>"


def make_key(*keys: Any) -> str:
    """Join key segments with dots, dropping None segments.

    Args:
        *keys: Key segments of any type; each is rendered with str().

    Returns:
        The dotted key.
    """
    return KEY_SEPARATOR.join(safe_str(k) for k in keys if k is not None)


def flatten_attributes(
    value: Any,
    parent_key: str | None = None,
    ref: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Flatten nested mappings, sequences and records into dotted keys.

    Traversal is depth-first in key order, so the insertion order of the
    result follows the source value. There is no depth limit; a container or
    record that contains itself is rendered as "<cycle>" at the point of
    re-entry.

    Args:
        value: The value to flatten.
        parent_key: Key prefix for everything under value.
        ref: Accumulator to write into. A fresh dict is used when omitted.

    Returns:
        The accumulator, mapping dotted keys to leaf values.
    """
    if ref is None:
        ref = {}
    _flatten(value, parent_key, ref, set())
    return ref


def _flatten(
    value: Any, parent_key: str | None, ref: dict[str, Any], active: set[int]
) -> None:
    if isinstance(value, Mapping | list | tuple):
        if id(value) in active:
            ref[NODE_KEY if parent_key is None else parent_key] = CYCLE_MARKER
            return
        active.add(id(value))
        try:
            items = value.items() if isinstance(value, Mapping) else enumerate(value)
            for k, v in items:
                _flatten(v, make_key(parent_key, k), ref, active)
        finally:
            active.discard(id(value))
    elif isinstance(value, SerializableRecord) and not isinstance(value, type):
        root = RECORD_KEY if parent_key is None else parent_key
        # as_mapping() may build a fresh container on every call, so the
        # record itself is what marks a back-reference.
        if id(value) in active:
            ref[root] = CYCLE_MARKER
            return
        active.add(id(value))
        try:
            _flatten(value.as_mapping(), root, ref, active)
        finally:
            active.discard(id(value))
    else:
        ref[NODE_KEY if parent_key is None else parent_key] = value


def render_attributes(flat: Mapping[str, Any]) -> str:
    """Render flat attributes as space-separated key=value tokens.

    Args:
        flat: Flattened attributes.

    Returns:
        Tokens in mapping order, e.g. "a=1 b.c=2". Empty for no attributes.
    """
    return " ".join(f"{safe_str(k)}={safe_str(v)}" for k, v in flat.items())
