"""Moves an order to the Refunded payment state."""

import structlog
from protean.utils.globals import current_domain

from refunds.order.order import Order
from refunds.refund.ports import FullyRefundedStateResolver

logger = structlog.get_logger(__name__)


class OrderFullyRefundedStateResolver(FullyRefundedStateResolver):
    def resolve(self, order) -> None:
        order.mark_fully_refunded()
        current_domain.repository_for(Order).add(order)
        logger.info("Order fully refunded", order_number=order.number)
