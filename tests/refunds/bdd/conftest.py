"""Shared BDD fixtures for refund scenarios, backed by in-memory collaborators."""

import pytest
from refunds.publisher.port import EventPublisher
from refunds.refund.ports import (
    FullyRefundedStateResolver,
    FullyRefundedTotalChecker,
    Refunder,
    RefundingAvailabilityChecker,
)


class StubAvailabilityChecker(RefundingAvailabilityChecker):
    def __init__(self):
        self.available = True

    def __call__(self, order_number):
        return self.available


class StubRefunder(Refunder):
    def __init__(self):
        self.amount = 0
        self.calls = []

    def refund_from_order(self, ids, order_number):
        self.calls.append((ids, order_number))
        return self.amount


class RecordingPublisher(EventPublisher):
    def __init__(self):
        self.published = []

    def publish(self, event):
        self.published.append(event)


class StubOrderRepository:
    def __init__(self):
        self.order = object()
        self.lookups = []

    def find_one_by_number(self, number):
        self.lookups.append(number)
        return self.order


class StubTotalChecker(FullyRefundedTotalChecker):
    def __init__(self):
        self.fully_refunded = False

    def check(self, order):
        return self.fully_refunded


class RecordingStateResolver(FullyRefundedStateResolver):
    def __init__(self):
        self.resolved = []

    def resolve(self, order):
        self.resolved.append(order)


@pytest.fixture()
def collaborators():
    return {
        "availability_checker": StubAvailabilityChecker(),
        "units_refunder": StubRefunder(),
        "shipments_refunder": StubRefunder(),
        "publisher": RecordingPublisher(),
        "order_repository": StubOrderRepository(),
        "fully_refunded_total_checker": StubTotalChecker(),
        "fully_refunded_state_resolver": RecordingStateResolver(),
    }


@pytest.fixture()
def outcome():
    """Container for the captured error of the When step."""
    return {"exc": None}
