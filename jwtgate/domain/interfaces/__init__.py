"""Domain interfaces (ports) implemented by the infrastructure layer."""

from .events import IEventPublisher
from .mail import IMailSender
from .stores import ICredentialStore, IProfileStore, IRoleStore

__all__ = [
    "ICredentialStore",
    "IEventPublisher",
    "IMailSender",
    "IProfileStore",
    "IRoleStore",
]
