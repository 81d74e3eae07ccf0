"""Repository for the Refund aggregate."""

from refunds.domain import refunds
from refunds.refund.refund import Refund, RefundType


@refunds.repository(part_of=Refund)
class RefundRepository:
    def find_by_order_number(self, order_number: str) -> list[Refund]:
        return self._dao.query.filter(order_number=order_number).all().items

    def find_by_refunded_unit(self, order_number: str, unit_id: int, refund_type: RefundType) -> list[Refund]:
        """Refunds already issued for one unit (or shipment) of an order."""
        return (
            self._dao.query.filter(
                order_number=order_number,
                refunded_unit_id=unit_id,
                refund_type=refund_type.value,
            )
            .all()
            .items
        )
