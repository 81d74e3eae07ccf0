"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from refunds.domain import refunds


@refunds.event(part_of="Order")
class OrderPaid:
    """The order's payment was captured, making it eligible for refunds."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    order_number = String(required=True)
    total = Integer(required=True)
    paid_at = DateTime(required=True)


@refunds.event(part_of="Order")
class OrderFullyRefunded:
    """Everything the customer paid for the order has been refunded."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    order_number = String(required=True)
    refunded_at = DateTime(required=True)
