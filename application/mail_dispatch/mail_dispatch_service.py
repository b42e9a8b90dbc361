"""Application service that sends the greeting email."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.logging_config import log_event
from core.settings import MailSettings
from domain.mail_sender import EmailMessage, MailSender

logger = logging.getLogger(__name__)

GREETING_SUBJECT = "Hello world!"
GREETING_BODY = "This is an email sent by a Python app."


@dataclass(slots=True)
class MailDispatchService:
    """Builds the fixed greeting message and hands it to the mail sender.

    Stateless apart from the injected collaborators; one instance serves
    every request. ``MessagingError`` raised by the sender is not caught here.
    """

    sender: MailSender
    mail_settings: MailSettings
    _logger: logging.Logger = field(default_factory=lambda: logger)

    def build_message(self) -> EmailMessage:
        return EmailMessage(
            from_address=self.mail_settings.sender,
            to=self.mail_settings.recipient,
            subject=GREETING_SUBJECT,
            body=GREETING_BODY,
        )

    def handle_request(self) -> str:
        """Send one greeting email and return the confirmation text."""
        mail_settings = self.mail_settings
        log_event(
            self._logger,
            "Sending email to %s",
            "mail.dispatch.start",
            mail_settings.recipient,
            to=mail_settings.recipient,
        )

        self.sender.send(self.build_message())

        log_event(
            self._logger,
            "Email successfully sent",
            "mail.dispatch.sent",
            to=mail_settings.recipient,
        )
        return f"Email sent to {mail_settings.recipient}"
