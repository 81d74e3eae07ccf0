"""Refund aggregate (CQRS) — one record per refunded unit or shipment.

Refunds are never updated once written. The sum of refunds recorded for a
unit is what makes it (partially or fully) refunded, and the sum over the
whole order decides whether the order is fully refunded.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Integer, String

from refunds.domain import refunds
from refunds.refund.events import ShipmentRefunded, UnitRefunded


class RefundType(Enum):
    ORDER_ITEM_UNIT = "order_item_unit"
    SHIPMENT = "shipment"


@refunds.aggregate
class Refund:
    order_number = String(required=True, max_length=255)
    refunded_unit_id = Integer(required=True)
    amount = Integer(required=True, min_value=1)
    refund_type = String(required=True, choices=RefundType)
    created_at = DateTime()

    @classmethod
    def create(cls, order_number, refunded_unit_id, amount, refund_type):
        now = datetime.now(UTC)
        refund = cls(
            order_number=order_number,
            refunded_unit_id=refunded_unit_id,
            amount=amount,
            refund_type=refund_type.value,
            created_at=now,
        )

        if refund_type == RefundType.SHIPMENT:
            event = ShipmentRefunded(
                refund_id=str(refund.id),
                order_number=order_number,
                shipment_id=refunded_unit_id,
                amount=amount,
                refunded_at=now,
            )
        else:
            event = UnitRefunded(
                refund_id=str(refund.id),
                order_number=order_number,
                unit_id=refunded_unit_id,
                amount=amount,
                refunded_at=now,
            )
        refund.raise_(event)
        return refund
