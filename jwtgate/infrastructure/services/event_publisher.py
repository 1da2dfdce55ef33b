"""Event Publisher Infrastructure Service.

Concrete implementation of the domain event publishing interface. Events are
written to the structured log, which is where audit and security monitoring
pick them up. Nothing is retained in process memory.
"""

import structlog

from jwtgate.domain.events import BaseDomainEvent
from jwtgate.domain.interfaces import IEventPublisher

logger = structlog.get_logger(__name__)


class LoggingEventPublisher(IEventPublisher):
    """Publishes domain events as structured log records.

    Only the event type, user id, correlation id and timestamp are logged;
    email addresses carried by some events stay out of the log.
    """

    async def publish(self, event: BaseDomainEvent) -> None:
        logger.info(
            "Domain event published",
            event_type=type(event).__name__,
            user_id=getattr(event, "user_id", None),
            correlation_id=event.correlation_id,
            occurred_at=event.occurred_at.isoformat(),
        )
