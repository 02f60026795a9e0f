"""Outbound email interface."""

from muse.domain.value import Email


class EmailSender:
    """Generic email transport interface.

    Implementations live in the adapter layer (SMTP in production, a
    recording mock in tests).
    """

    async def send_password_recovery(self, email: Email, reset_link: str) -> None:
        """Deliver a password recovery link.

        Args:
            email: Validated recipient address
            reset_link: Link carrying the recovery token
        """
        raise NotImplementedError
