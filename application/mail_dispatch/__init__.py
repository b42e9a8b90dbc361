from .mail_dispatch_service import (
    GREETING_BODY,
    GREETING_SUBJECT,
    MailDispatchService,
)

__all__ = ["GREETING_BODY", "GREETING_SUBJECT", "MailDispatchService"]
