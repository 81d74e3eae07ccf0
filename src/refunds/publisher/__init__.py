"""Event publisher factory.

Provides get_publisher() / set_publisher() to swap implementations:
- DomainEventPublisher (default) publishes through the active Protean domain
- Hosts may install an adapter over their own message transport
"""

from refunds.publisher.port import EventPublisher
from refunds.publisher.protean_adapter import DomainEventPublisher

_current_publisher: EventPublisher | None = None


def get_publisher() -> EventPublisher:
    """Return the current event publisher. Defaults to DomainEventPublisher."""
    global _current_publisher
    if _current_publisher is None:
        _current_publisher = DomainEventPublisher()
    return _current_publisher


def set_publisher(publisher: EventPublisher) -> None:
    """Override the active event publisher (useful for tests)."""
    global _current_publisher
    _current_publisher = publisher


def reset_publisher() -> None:
    """Reset to default publisher."""
    global _current_publisher
    _current_publisher = None
