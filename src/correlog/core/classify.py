"""Classification of log call payloads."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from correlog.core.models import GenericMessage, Payload, StructuredEvent
from correlog.core.text import safe_str


@dataclass(frozen=True)
class Classified:
    """Message prefix and raw attributes of a log call.

    Attributes:
        prefix: Leading text of the message.
        attributes: Unflattened attributes; empty for generic messages.
        structured: True when the payload was a StructuredEvent.
    """

    prefix: str
    attributes: Mapping[Any, Any] = field(default_factory=dict)
    structured: bool = False


def as_payload(msg: Any) -> Payload:
    """Resolve an arbitrary log call argument into a Payload.

    Args:
        msg: Whatever was passed to the log call.

    Returns:
        The StructuredEvent itself, or the value wrapped in a GenericMessage.
    """
    if isinstance(msg, StructuredEvent | GenericMessage):
        return msg
    return GenericMessage(msg)


def classify(payload: Payload) -> Classified:
    """Produce the message prefix and attributes of a payload.

    Args:
        payload: A StructuredEvent or GenericMessage.

    Returns:
        Classified prefix and attributes.
    """
    match payload:
        case StructuredEvent(event=event, attributes=attributes):
            prefix = "" if event is None else safe_str(event)
            return Classified(prefix=prefix, attributes=attributes, structured=True)
        case GenericMessage(message=message):
            return Classified(prefix=safe_str(message))
