"""Refund total providers.

Amounts are integers in minor currency units (cents), summed from the Refund
records written so far.
"""

from protean.utils.globals import current_domain

from refunds.refund.refund import Refund, RefundType


class RemainingTotalProvider:
    """How much of a unit or shipment has not been refunded yet."""

    def total_left_to_refund(self, order, unit_id: int, refund_type: RefundType) -> int:
        if refund_type == RefundType.SHIPMENT:
            total = order.shipment(unit_id).total
        else:
            total = order.unit(unit_id).total

        refunded = current_domain.repository_for(Refund).find_by_refunded_unit(order.number, unit_id, refund_type)
        return total - sum(refund.amount for refund in refunded)


class RefundedTotalProvider:
    """Sum of every refund issued for an order."""

    def __call__(self, order) -> int:
        refunds = current_domain.repository_for(Refund).find_by_order_number(order.number)
        return sum(refund.amount for refund in refunds)
