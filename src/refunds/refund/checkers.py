"""Default refund checkers backed by the Order and Refund repositories."""

import structlog
from protean.utils.globals import current_domain

from refunds.order.order import Order, OrderPaymentState
from refunds.refund.ports import FullyRefundedTotalChecker, RefundingAvailabilityChecker
from refunds.refund.providers import RefundedTotalProvider

logger = structlog.get_logger(__name__)

# Payment states from which units may still be refunded
REFUNDABLE_PAYMENT_STATES = {OrderPaymentState.PAID}


class OrderRefundingAvailabilityChecker(RefundingAvailabilityChecker):
    def __call__(self, order_number: str) -> bool:
        order = current_domain.repository_for(Order).find_one_by_number(order_number)
        available = OrderPaymentState(order.payment_state) in REFUNDABLE_PAYMENT_STATES
        if not available:
            logger.info(
                "Order not available for refunding",
                order_number=order_number,
                payment_state=order.payment_state,
            )
        return available


class OrderFullyRefundedTotalChecker(FullyRefundedTotalChecker):
    def __init__(self, refunded_total_provider: RefundedTotalProvider | None = None) -> None:
        self.refunded_total_provider = refunded_total_provider or RefundedTotalProvider()

    def check(self, order) -> bool:
        return order.total() == self.refunded_total_provider(order)
