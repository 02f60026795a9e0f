"""Email infrastructure providers."""

from dishka import Scope, provide

from muse.adapter.email import SmtpEmailSender
from muse.config import EmailSettings
from muse.domain.service import EmailSender
from muse.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider delivering over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide SMTP email sender."""
        return SmtpEmailSender(email_settings)
