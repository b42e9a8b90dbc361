"""Outbound email message value object - Domain layer.

値オブジェクトは不変（immutable）であり、リクエストごとに新しく生成されます。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """A single outbound email.

    Addresses are carried as given; rejecting malformed ones is left to the
    mail transport.

    Attributes:
        from_address: 送信元メールアドレス
        to: 送信先メールアドレス
        subject: メールの件名
        body: メールの本文（プレーンテキスト）
    """

    from_address: str
    to: str
    subject: str
    body: str
