"""Email transport adapters."""

from .sender import MockEmailSender, SentEmail, SmtpEmailSender

__all__ = ["MockEmailSender", "SentEmail", "SmtpEmailSender"]
