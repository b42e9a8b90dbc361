"""Mail sender domain layer.

このモジュールはメール送信機能のドメイン層を提供します。
ドメイン層は具体的な実装に依存せず、契約（インターフェース）のみを定義します。
"""

from .email_message import EmailMessage
from .exceptions import MessagingError
from .sender_interface import MailSender

__all__ = ["EmailMessage", "MailSender", "MessagingError"]
