"""SMTP mail sender implementation - Infrastructure layer.

このモジュールはSMTPプロトコルを使用したメール送信の実装を提供します。
Flask-Mailmanを使用して、MAIL_*設定との互換性を保ちます。
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass, field

from flask import current_app, has_app_context
from flask_mailman import EmailMessage as FlaskEmailMessage
from flask_mailman import Mail

from domain.mail_sender.email_message import EmailMessage
from domain.mail_sender.exceptions import MessagingError

logger = logging.getLogger(__name__)

# Failures raised while talking to the server or serialising addresses.
_TRANSPORT_ERRORS = (smtplib.SMTPException, OSError, ValueError)


@dataclass
class SmtpMailSender:
    """SMTPを使用したメール送信実装.

    Flask-Mailmanのコネクション経由でメールを送信します。
    送信時のエラーはすべて MessagingError に変換され、再試行は行いません。

    Note:
        Protocol (MailSender) の構造的部分型付けに準拠。
        明示的な継承は不要です。
    """

    mail: Mail
    _logger: logging.Logger = field(default_factory=lambda: logger)

    def send(self, message: EmailMessage) -> None:
        """SMTPでメールを送信する.

        Args:
            message: 送信するメールメッセージ

        Raises:
            MessagingError: 送信中にエラーが発生した場合
        """
        try:
            connection = self.mail.get_connection(fail_silently=False)
            self._to_flask_message(message, connection).send(fail_silently=False)
        except _TRANSPORT_ERRORS as exc:
            self._logger.error(
                "Failed to send email via SMTP: %s",
                exc,
                extra={
                    "event": "mail.smtp.error",
                    "to": message.to,
                    "subject": message.subject,
                    "error": str(exc),
                },
            )
            raise MessagingError(f"Could not send email to {message.to}: {exc}") from exc

        self._logger.info(
            "Email sent successfully via SMTP",
            extra={
                "event": "mail.smtp.sent",
                "to": message.to,
                "subject": message.subject,
            },
        )

    def validate_config(self) -> bool:
        """SMTP設定が有効かどうかを検証する.

        Returns:
            bool: 設定が有効な場合True、無効な場合False
        """
        if not has_app_context():
            self._logger.warning("SMTP config checked outside of an application context")
            return False

        config = current_app.config
        if not config.get("MAIL_SERVER"):
            self._logger.warning("MAIL_SERVER is not configured")
            return False
        if "mailman" not in current_app.extensions:
            self._logger.warning("Flask-Mailman is not initialised on the application")
            return False
        return True

    @staticmethod
    def _to_flask_message(message: EmailMessage, connection) -> FlaskEmailMessage:
        """ドメインメッセージをFlask-Mailmanメッセージに変換."""
        return FlaskEmailMessage(
            subject=message.subject,
            body=message.body,
            from_email=message.from_address,
            to=[message.to],
            connection=connection,
        )


__all__ = ["SmtpMailSender"]
