"""Default refunders — record a Refund for every unit or shipment given back.

Each refunder gives back whatever is left to refund on the unit (or
shipment) and returns the sum of the amounts it refunded. Ids are processed
in the order given; a repeated id is refunded again, which fails with
UnitAlreadyRefunded once nothing is left on it.
"""

import structlog
from protean.utils.globals import current_domain

from refunds.order.order import Order
from refunds.refund.exceptions import UnitAlreadyRefunded
from refunds.refund.ports import Refunder
from refunds.refund.providers import RemainingTotalProvider
from refunds.refund.refund import Refund, RefundType

logger = structlog.get_logger(__name__)


class RefundCreator:
    """Persist a single Refund record."""

    def __call__(self, order_number: str, unit_id: int, amount: int, refund_type: RefundType) -> Refund:
        if amount <= 0:
            raise UnitAlreadyRefunded(unit_id, refund_type)

        refund = Refund.create(
            order_number=order_number,
            refunded_unit_id=unit_id,
            amount=amount,
            refund_type=refund_type,
        )
        current_domain.repository_for(Refund).add(refund)
        return refund


class _OrderRefunder(Refunder):
    refund_type: RefundType

    def __init__(
        self,
        refund_creator: RefundCreator | None = None,
        remaining_total_provider: RemainingTotalProvider | None = None,
    ) -> None:
        self.refund_creator = refund_creator or RefundCreator()
        self.remaining_total_provider = remaining_total_provider or RemainingTotalProvider()

    def refund_from_order(self, ids: list[int], order_number: str) -> int:
        if not ids:
            return 0

        order = current_domain.repository_for(Order).find_one_by_number(order_number)

        refunded_total = 0
        for unit_id in ids:
            amount = self.remaining_total_provider.total_left_to_refund(order, unit_id, self.refund_type)
            self.refund_creator(order_number, unit_id, amount, self.refund_type)
            refunded_total += amount

        logger.info(
            "Refunded from order",
            order_number=order_number,
            refund_type=self.refund_type.value,
            ids=ids,
            amount=refunded_total,
        )
        return refunded_total


class OrderItemUnitsRefunder(_OrderRefunder):
    refund_type = RefundType.ORDER_ITEM_UNIT


class OrderShipmentsRefunder(_OrderRefunder):
    refund_type = RefundType.SHIPMENT
