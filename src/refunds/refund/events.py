"""Domain events for refunds.

UnitRefunded and ShipmentRefunded are raised by the Refund aggregate for
every single unit or shipment given back. UnitsRefunded summarises one
RefundUnits request and is handed to the event publisher for subscribers
such as refund payment generation.
"""

from protean.fields import DateTime, Identifier, Integer, List, String

from refunds.domain import refunds


@refunds.event(part_of="Refund")
class UnitRefunded:
    """An order item unit was refunded."""

    __version__ = "v1"

    refund_id = Identifier(required=True)
    order_number = String(required=True)
    unit_id = Integer(required=True)
    amount = Integer(required=True)
    refunded_at = DateTime(required=True)


@refunds.event(part_of="Refund")
class ShipmentRefunded:
    """The shipping charge of a shipment was refunded."""

    __version__ = "v1"

    refund_id = Identifier(required=True)
    order_number = String(required=True)
    shipment_id = Integer(required=True)
    amount = Integer(required=True)
    refunded_at = DateTime(required=True)


@refunds.event(part_of="Refund")
class UnitsRefunded:
    """A batch of units and shipments of one order was refunded."""

    __version__ = "v1"

    order_number = String(required=True)
    unit_ids = List(content_type=Integer, default=list)
    shipment_ids = List(content_type=Integer, default=list)
    amount = Integer(required=True)
