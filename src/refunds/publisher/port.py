"""Event publisher port (abstract interface).

Defines how refund workflows hand finished domain events over to whoever
is interested. Delivery guarantees (sync or async, at-least-once) are a
property of the adapter the host application installs.
"""

from abc import ABC, abstractmethod

from protean.core.event import BaseEvent


class EventPublisher(ABC):
    """Abstract event publisher interface."""

    @abstractmethod
    def publish(self, event: BaseEvent) -> None:
        """Deliver the event to its subscribers."""
        ...
