"""SMTP mail sender built on fastapi-mail.

Renders the password recovery templates with jinja2 and sends them as a
single ``multipart/alternative`` message carrying both a plain-text and an
HTML part. Delivery errors are logged and re-raised so the workflow can turn
them into an internal error.
"""

from typing import Any, Dict

import structlog
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.schemas import MultipartSubtypeEnum
from jinja2 import Environment, StrictUndefined

from jwtgate.core.config.settings import Settings
from jwtgate.core.logging import mask_email
from jwtgate.domain.interfaces import IMailSender

logger = structlog.get_logger(__name__)


class FastMailSender(IMailSender):
    """Sends password recovery mail through a configured ``FastMail`` client.

    Subject and text body are rendered without escaping; the HTML body is
    rendered with autoescaping so an address or code can never inject markup.
    Every template receives ``code`` and ``email``.
    """

    def __init__(self, fastmail: FastMail):
        self._fastmail = fastmail
        self._text_env = Environment(autoescape=False, undefined=StrictUndefined)
        self._html_env = Environment(autoescape=True, undefined=StrictUndefined)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FastMailSender":
        password = settings.EMAIL_SMTP_PASSWORD
        config = ConnectionConfig(
            MAIL_USERNAME=settings.EMAIL_SMTP_USERNAME or "",
            MAIL_PASSWORD=password.get_secret_value() if password else "",
            MAIL_FROM=settings.EMAIL_FROM_EMAIL,
            MAIL_FROM_NAME=settings.EMAIL_FROM_NAME,
            MAIL_PORT=settings.EMAIL_SMTP_PORT,
            MAIL_SERVER=settings.EMAIL_SMTP_HOST,
            MAIL_STARTTLS=settings.EMAIL_SMTP_USE_TLS,
            MAIL_SSL_TLS=settings.EMAIL_SMTP_USE_SSL,
            USE_CREDENTIALS=bool(settings.EMAIL_SMTP_USERNAME and password),
            VALIDATE_CERTS=True,
            SUPPRESS_SEND=1 if settings.EMAIL_TEST_MODE else 0,
        )
        logger.info(
            "FastMail configured",
            smtp_host=settings.EMAIL_SMTP_HOST,
            test_mode=settings.EMAIL_TEST_MODE,
        )
        return cls(FastMail(config))

    def render(self, code: str, destination: str, subject: str, text_body: str, html_body: str):
        """Renders the three templates; returns ``(subject, text, html)``."""
        context: Dict[str, Any] = {"code": code, "email": destination}
        return (
            self._text_env.from_string(subject).render(context).strip(),
            self._text_env.from_string(text_body).render(context),
            self._html_env.from_string(html_body).render(context),
        )

    async def send_password_recovery_mail(
        self,
        destination: str,
        code: str,
        subject: str,
        text_body: str,
        html_body: str,
    ) -> None:
        rendered_subject, text, html = self.render(code, destination, subject, text_body, html_body)
        message = MessageSchema(
            subject=rendered_subject,
            recipients=[destination],
            body=html,
            alternative_body=text,
            subtype=MessageType.html,
            multipart_subtype=MultipartSubtypeEnum.alternative,
        )
        try:
            await self._fastmail.send_message(message)
        except Exception as e:
            logger.error(
                "Failed to send password recovery mail",
                to_email=mask_email(destination),
                error=str(e),
            )
            raise
        logger.info("Password recovery mail sent", to_email=mask_email(destination))
