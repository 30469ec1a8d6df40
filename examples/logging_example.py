"""Example of correlated JSON logging with the standard library.

Requires opentelemetry-sdk. Run with:
    DD_SERVICE=checkout DD_ENV=dev python examples/logging_example.py

Output:
    One JSON line per log call on stdout. Lines written inside the
    "checkout" span carry env, service, source, trace_id and version.
"""

import logging
import sys

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider

from correlog import CorrelogFormatter, build_formatter, event, timed_event


class Order:
    """Domain object that knows its own mapping form."""

    def __init__(self, order_id: int, total: float) -> None:
        self.order_id = order_id
        self.total = total

    def as_mapping(self) -> dict[str, object]:
        return {"id": self.order_id, "total": self.total}


def _redact(attrs: dict[str, object]) -> dict[str, object]:
    return {k: "[FILTERED]" if k.endswith("card_number") else v for k, v in attrs.items()}


trace.set_tracer_provider(TracerProvider())
tracer = trace.get_tracer(__name__)

handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(CorrelogFormatter(build_formatter(attribute_transformer=_redact)))
logging.basicConfig(level=logging.INFO, handlers=[handler])
logger = logging.getLogger("checkout")


def main() -> None:
    logger.info("service starting")

    with tracer.start_as_current_span("checkout"):
        order = Order(42, 19.99)
        logger.info(
            event(
                "order.placed",
                order=order,
                payment={"card_number": "4111111111111111", "method": "card"},
                items=[{"sku": "tea", "qty": 2}],
            )
        )

        with timed_event("payment.charge", order_id=order.order_id) as timing:
            logger.info(timing.events[0])
            try:
                raise TimeoutError("gateway did not answer")
            except TimeoutError:
                logger.exception(event("payment.failed", order_id=order.order_id))
        logger.info(timing.events[-1])


if __name__ == "__main__":
    main()
