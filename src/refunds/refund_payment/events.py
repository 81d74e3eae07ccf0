"""Domain events for the RefundPayment aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from refunds.domain import refunds


@refunds.event(part_of="RefundPayment")
class RefundPaymentGenerated:
    """A refund payment was created to return money for refunded units."""

    __version__ = "v1"

    refund_payment_id = Identifier(required=True)
    order_number = String(required=True)
    amount = Integer(required=True)
    currency_code = String(required=True)
    generated_at = DateTime(required=True)


@refunds.event(part_of="RefundPayment")
class RefundPaymentCompleted:
    """The money of a refund payment was given back to the customer."""

    __version__ = "v1"

    refund_payment_id = Identifier(required=True)
    order_number = String(required=True)
    completed_at = DateTime(required=True)
