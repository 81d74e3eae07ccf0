"""Refund collaborator ports (abstract interfaces).

RefundUnitsWorkflow only talks to these contracts. The default adapters in
checkers.py, refunders.py and order/state_resolver.py are backed by the
Protean repositories; tests substitute plain fakes.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol


class RefundingAvailabilityChecker(ABC):
    """Decides whether an order may be refunded right now."""

    @abstractmethod
    def __call__(self, order_number: str) -> bool: ...


class Refunder(ABC):
    """Refunds a list of units (or shipments) of one order."""

    @abstractmethod
    def refund_from_order(self, ids: list[int], order_number: str) -> int:
        """Perform the refunds and return the refunded amount in minor currency units."""
        ...


class FullyRefundedTotalChecker(ABC):
    """Decides whether an order has nothing left to refund."""

    @abstractmethod
    def check(self, order: Any) -> bool:
        """True when the order's refunded total equals its payable total."""
        ...


class FullyRefundedStateResolver(ABC):
    """Moves an order into its fully refunded state."""

    @abstractmethod
    def resolve(self, order: Any) -> None:
        """Mark the order fully refunded."""
        ...


class OrderFinder(Protocol):
    # Satisfied structurally by the Protean OrderRepository.
    def find_one_by_number(self, number: str) -> Any: ...
