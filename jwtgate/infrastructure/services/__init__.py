from .event_publisher import LoggingEventPublisher
from .mail_sender import FastMailSender

__all__ = ["FastMailSender", "LoggingEventPublisher"]
