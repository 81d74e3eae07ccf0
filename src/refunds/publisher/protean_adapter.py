"""Event publisher backed by the active Protean domain.

Events go through current_domain.publish(), so they land in the event store
and reach the domain's event handlers. With event_processing = "sync" the
handlers run before publish() returns.
"""

import structlog
from protean.core.event import BaseEvent
from protean.utils.globals import current_domain

from refunds.publisher.port import EventPublisher

logger = structlog.get_logger(__name__)


class DomainEventPublisher(EventPublisher):
    def publish(self, event: BaseEvent) -> None:
        logger.debug("Publishing event", event_type=type(event).__name__)
        current_domain.publish(event)
