"""Email transport implementations.

Delivers password recovery links over SMTP.
"""

import asyncio
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

import logfire

from muse.adapter.error import EmailDeliveryError
from muse.config import EmailSettings
from muse.domain.service.email_sender import EmailSender
from muse.domain.value import Email

RECOVERY_SUBJECT = "Reset your Muse password"

RECOVERY_BODY = """Hello,

We received a request to reset the password of your Muse account.
Open the link below to choose a new password:

{reset_link}

The link expires soon. If you did not ask for a reset, ignore this email.
"""


class SmtpEmailSender(EmailSender):
    """SMTP email transport.

    ``smtplib`` is blocking, so delivery runs in a worker thread.
    """

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP sender.

        Args:
            settings: SMTP connection and sender configuration
        """
        self.settings = settings

    async def send_password_recovery(self, email: Email, reset_link: str) -> None:
        """Send the recovery link to ``email``.

        Raises:
            EmailDeliveryError: If the SMTP server refuses or is unreachable
        """
        message = EmailMessage()
        message["From"] = self.settings.sender
        message["To"] = email.root
        message["Subject"] = RECOVERY_SUBJECT
        message.set_content(RECOVERY_BODY.format(reset_link=reset_link))

        with logfire.span("smtp.send_password_recovery", host=self.settings.smtp_host):
            try:
                await asyncio.to_thread(self._send, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error("Recovery email delivery failed", error=str(e))
                raise EmailDeliveryError(f"Failed to send email: {e}") from e

            logfire.info("Recovery email delivered")

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port) as server:
            if self.settings.use_tls:
                server.starttls()
            if self.settings.smtp_username and self.settings.smtp_password:
                server.login(
                    self.settings.smtp_username,
                    self.settings.smtp_password.get_secret_value(),
                )
            server.send_message(message)


@dataclass(frozen=True)
class SentEmail:
    """Email captured by MockEmailSender."""

    to: str
    reset_link: str


class MockEmailSender(EmailSender):
    """Mock email transport for testing.

    Records messages instead of sending them.
    """

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []

    async def send_password_recovery(self, email: Email, reset_link: str) -> None:
        """Record the recovery email."""
        self.sent.append(SentEmail(to=email.root, reset_link=reset_link))
