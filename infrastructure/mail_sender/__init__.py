"""Mail sender infrastructure layer - Concrete implementations.

各実装はドメイン層のMailSenderプロトコルに準拠します。

Note:
    Console/recording senders are test-only and live in tests/helpers/mail_sender/.
"""

from .factory import MailSenderFactory
from .smtp_sender import SmtpMailSender

__all__ = ["MailSenderFactory", "SmtpMailSender"]
