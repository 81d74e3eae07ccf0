"""Refund units — command and handler.

The handler wires RefundUnitsWorkflow with the repository-backed
collaborators and the active event publisher, then delegates to it.
"""

from protean import handle
from protean.fields import Integer, List, String
from protean.utils.globals import current_domain

from refunds.domain import refunds
from refunds.order.order import Order
from refunds.order.state_resolver import OrderFullyRefundedStateResolver
from refunds.publisher import get_publisher
from refunds.refund.checkers import OrderFullyRefundedTotalChecker, OrderRefundingAvailabilityChecker
from refunds.refund.refund import Refund
from refunds.refund.refunders import OrderItemUnitsRefunder, OrderShipmentsRefunder
from refunds.refund.workflow import RefundUnitsWorkflow


@refunds.command(part_of="Refund")
class RefundUnits:
    """Refund order item units and shipments of an order."""

    order_number = String(required=True, max_length=255)
    unit_ids = List(content_type=Integer, default=list)
    shipment_ids = List(content_type=Integer, default=list)


def build_refund_units_workflow() -> RefundUnitsWorkflow:
    return RefundUnitsWorkflow(
        units_refunder=OrderItemUnitsRefunder(),
        shipments_refunder=OrderShipmentsRefunder(),
        availability_checker=OrderRefundingAvailabilityChecker(),
        publisher=get_publisher(),
        order_repository=current_domain.repository_for(Order),
        fully_refunded_total_checker=OrderFullyRefundedTotalChecker(),
        fully_refunded_state_resolver=OrderFullyRefundedStateResolver(),
    )


@refunds.command_handler(part_of=Refund)
class RefundUnitsHandler:
    @handle(RefundUnits)
    def refund_units(self, command):
        build_refund_units_workflow().handle(command)
