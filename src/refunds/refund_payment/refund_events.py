"""Event handler — RefundPayment reacts to Refund events.

Listens for UnitsRefunded on the refund stream and generates a refund
payment for the refunded amount, in the order's currency.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from refunds.domain import refunds
from refunds.order.order import Order
from refunds.refund.events import UnitsRefunded
from refunds.refund_payment.refund_payment import RefundPayment

logger = structlog.get_logger(__name__)


@refunds.event_handler(part_of=RefundPayment, stream_category="refunds::refund")
class RefundPaymentEventHandler:
    """Reacts to Refund events to generate refund payments."""

    @handle(UnitsRefunded)
    def on_units_refunded(self, event: UnitsRefunded) -> None:
        order = current_domain.repository_for(Order).find_one_by_number(event.order_number)

        refund_payment = RefundPayment.generate(
            order_number=event.order_number,
            amount=event.amount,
            currency_code=order.currency_code,
        )
        current_domain.repository_for(RefundPayment).add(refund_payment)

        logger.info(
            "Refund payment generated",
            refund_payment_id=str(refund_payment.id),
            order_number=event.order_number,
            amount=event.amount,
        )
