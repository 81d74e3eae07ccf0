"""Order aggregate (CQRS) — the refundable view of a placed order.

Only what refunding needs is kept: the order number customers and staff refer
to, the refundable order item units and shipments with their totals in minor
currency units, and the payment state.

Payment State Machine:
    AWAITING_PAYMENT → PAID → REFUNDED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Integer, String

from refunds.domain import refunds
from refunds.order.events import OrderFullyRefunded, OrderPaid


class OrderPaymentState(Enum):
    AWAITING_PAYMENT = "Awaiting_Payment"
    PAID = "Paid"
    REFUNDED = "Refunded"


_VALID_TRANSITIONS = {
    OrderPaymentState.AWAITING_PAYMENT: {OrderPaymentState.PAID},
    OrderPaymentState.PAID: {OrderPaymentState.REFUNDED},
    OrderPaymentState.REFUNDED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@refunds.entity(part_of="Order")
class OrderItemUnit:
    """A single unit of an ordered product, refundable on its own."""

    unit_id = Integer(required=True)
    product_name = String(max_length=255)
    total = Integer(required=True, min_value=0)


@refunds.entity(part_of="Order")
class Shipment:
    """A shipment of the order whose shipping charge can be refunded."""

    shipment_id = Integer(required=True)
    method = String(max_length=100)
    total = Integer(required=True, min_value=0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@refunds.aggregate
class Order:
    number = String(required=True, max_length=255)
    currency_code = String(max_length=3, default="USD")
    payment_state = String(
        choices=OrderPaymentState,
        default=OrderPaymentState.AWAITING_PAYMENT.value,
    )
    units = HasMany(OrderItemUnit)
    shipments = HasMany(Shipment)
    created_at = DateTime()
    refunded_at = DateTime()

    @classmethod
    def create(cls, number, units_data, shipments_data=None, currency_code="USD"):
        """Create an order awaiting payment.

        Args:
            number: The business order number, e.g. "000222".
            units_data: List of dicts with unit_id, total and optionally product_name.
            shipments_data: List of dicts with shipment_id, total and optionally method.
            currency_code: ISO 4217 code of the order's currency.
        """
        return cls(
            number=number,
            currency_code=currency_code,
            units=[OrderItemUnit(**unit) for unit in units_data],
            shipments=[Shipment(**shipment) for shipment in shipments_data or []],
            created_at=datetime.now(UTC),
        )

    def _assert_can_transition(self, target_state):
        current = OrderPaymentState(self.payment_state)
        if target_state not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError(
                {"payment_state": [f"Cannot transition from {current.value} to {target_state.value}"]}
            )

    def total(self):
        """Total payable amount of the order in minor currency units."""
        return sum(unit.total for unit in self.units) + sum(shipment.total for shipment in self.shipments)

    def unit(self, unit_id):
        unit = next((u for u in self.units if u.unit_id == unit_id), None)
        if unit is None:
            raise ValidationError({"unit_id": [f"Unit {unit_id} not found on order {self.number}"]})
        return unit

    def shipment(self, shipment_id):
        shipment = next((s for s in self.shipments if s.shipment_id == shipment_id), None)
        if shipment is None:
            raise ValidationError({"shipment_id": [f"Shipment {shipment_id} not found on order {self.number}"]})
        return shipment

    # -------------------------------------------------------------------
    # Payment state transitions
    # -------------------------------------------------------------------
    def mark_paid(self):
        self._assert_can_transition(OrderPaymentState.PAID)
        self.payment_state = OrderPaymentState.PAID.value

        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                order_number=self.number,
                total=self.total(),
                paid_at=datetime.now(UTC),
            )
        )

    def mark_fully_refunded(self):
        """Move the order to Refunded once its whole total has been given back."""
        self._assert_can_transition(OrderPaymentState.REFUNDED)
        now = datetime.now(UTC)
        self.payment_state = OrderPaymentState.REFUNDED.value
        self.refunded_at = now

        self.raise_(
            OrderFullyRefunded(
                order_id=str(self.id),
                order_number=self.number,
                refunded_at=now,
            )
        )
