"""Event publisher interface."""

from abc import ABC, abstractmethod

from jwtgate.domain.events import BaseDomainEvent


class IEventPublisher(ABC):
    """Publishes domain events for audit trails and security monitoring."""

    @abstractmethod
    async def publish(self, event: BaseDomainEvent) -> None:
        raise NotImplementedError
