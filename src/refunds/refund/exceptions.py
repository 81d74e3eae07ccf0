"""Refund-specific domain errors.

Both are ValidationErrors so generic handlers treat them as rejected
requests, while callers that care can catch them by type.
"""

from protean.exceptions import ValidationError


class OrderNotAvailableForRefunding(ValidationError):
    """The order is not in a state that allows refunds."""

    def __init__(self, order_number):
        self.order_number = order_number
        super().__init__({"order_number": [f"Order {order_number} is not available for refunding"]})


class UnitAlreadyRefunded(ValidationError):
    """Nothing is left to refund on the unit or shipment."""

    def __init__(self, unit_id, refund_type):
        self.unit_id = unit_id
        self.refund_type = refund_type
        super().__init__({"unit_id": [f"{refund_type.value} {unit_id} has already been refunded"]})
