"""Mail sender factory - Infrastructure layer.

このモジュールは設定に基づいて適切なメール送信実装を生成するファクトリを提供します。
"""

from __future__ import annotations

import logging
from typing import Final

from flask_mailman import Mail

from core.settings import DEFAULT_MAIL_PROVIDER, settings
from domain.mail_sender import MailSender

from .smtp_sender import SmtpMailSender

logger = logging.getLogger(__name__)


class MailSenderFactory:
    """メール送信実装のファクトリクラス.

    設定に基づいて適切なMailSender実装を生成します。

    Note:
        本番環境ではSMTPのみをサポートします。
        テスト用の送信実装は tests/helpers/mail_sender/ にあります。
    """

    PROVIDER_SMTP: Final[str] = "smtp"
    DEFAULT_PROVIDER: Final[str] = DEFAULT_MAIL_PROVIDER

    @classmethod
    def create(
        cls,
        provider: str | None = None,
        mail: Mail | None = None,
    ) -> MailSender:
        """設定に基づいてメール送信実装を生成する.

        Args:
            provider: メールプロバイダー名（smtp のみサポート）
            mail: Flask-Mailmanインスタンス（SMTPプロバイダーで必要）

        Returns:
            MailSender: メール送信実装

        Raises:
            ValueError: 未対応のプロバイダーが指定された場合
        """
        resolved_provider = (provider or settings.mail_provider).lower().strip()

        logger.info(
            "Creating mail sender with provider: %s",
            resolved_provider,
            extra={"event": "mail.factory.create", "provider": resolved_provider},
        )

        if resolved_provider == cls.PROVIDER_SMTP:
            return SmtpMailSender(mail=mail or cls._resolve_mail_instance())

        raise ValueError(
            f"Unsupported mail provider: {resolved_provider}. "
            f"Supported provider: {cls.PROVIDER_SMTP}."
        )

    @staticmethod
    def _resolve_mail_instance() -> Mail:
        """Flask-Mailmanインスタンスを取得."""
        from webapp.extensions import mail as app_mail

        return app_mail


__all__ = ["MailSenderFactory"]
