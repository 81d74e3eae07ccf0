"""RefundUnitsWorkflow — refund units and shipments of one order.

Steps, in this order:
    1. Reject the request unless the order is available for refunding
    2. Refund the order item units, then the shipments
    3. Publish UnitsRefunded with the summed amount
    4. Reload the order and mark it fully refunded if nothing is left to refund

The workflow keeps no state between calls and catches nothing: collaborator
errors reach the caller as raised. Handling the same command twice refunds
twice.
"""

import structlog

from refunds.publisher.port import EventPublisher
from refunds.refund.events import UnitsRefunded
from refunds.refund.exceptions import OrderNotAvailableForRefunding
from refunds.refund.ports import (
    FullyRefundedStateResolver,
    FullyRefundedTotalChecker,
    OrderFinder,
    Refunder,
    RefundingAvailabilityChecker,
)

logger = structlog.get_logger(__name__)


class RefundUnitsWorkflow:
    def __init__(
        self,
        units_refunder: Refunder,
        shipments_refunder: Refunder,
        availability_checker: RefundingAvailabilityChecker,
        publisher: EventPublisher,
        order_repository: OrderFinder,
        fully_refunded_total_checker: FullyRefundedTotalChecker,
        fully_refunded_state_resolver: FullyRefundedStateResolver,
    ) -> None:
        self.units_refunder = units_refunder
        self.shipments_refunder = shipments_refunder
        self.availability_checker = availability_checker
        self.publisher = publisher
        self.order_repository = order_repository
        self.fully_refunded_total_checker = fully_refunded_total_checker
        self.fully_refunded_state_resolver = fully_refunded_state_resolver

    def handle(self, command) -> None:
        order_number = command.order_number

        if not self.availability_checker(order_number):
            raise OrderNotAvailableForRefunding(order_number)

        unit_ids = list(command.unit_ids or [])
        shipment_ids = list(command.shipment_ids or [])

        units_amount = self.units_refunder.refund_from_order(unit_ids, order_number)
        shipments_amount = self.shipments_refunder.refund_from_order(shipment_ids, order_number)
        amount = units_amount + shipments_amount

        self.publisher.publish(
            UnitsRefunded(
                order_number=order_number,
                unit_ids=unit_ids,
                shipment_ids=shipment_ids,
                amount=amount,
            )
        )
        logger.info(
            "Units refunded",
            order_number=order_number,
            unit_ids=unit_ids,
            shipment_ids=shipment_ids,
            amount=amount,
        )

        order = self.order_repository.find_one_by_number(order_number)
        if self.fully_refunded_total_checker.check(order):
            self.fully_refunded_state_resolver.resolve(order)
