"""Mail sender interface."""

from abc import ABC, abstractmethod


class IMailSender(ABC):
    """Abstraction over outbound email delivery.

    Keeps the workflow independent of the SMTP provider and of how templates
    are rendered.
    """

    @abstractmethod
    async def send_password_recovery_mail(
        self,
        destination: str,
        code: str,
        subject: str,
        text_body: str,
        html_body: str,
    ) -> None:
        """Sends the password recovery email.

        Args:
            destination: Recipient email address.
            code: The raw reset code to embed in the message.
            subject: Subject template.
            text_body: Plain-text body template.
            html_body: HTML body template.

        Raises:
            Exception: Any delivery failure propagates to the caller.
        """
        raise NotImplementedError
