"""Errors raised by mail transports."""


class MessagingError(Exception):
    """Delivery of a message through the mail transport failed.

    Covers transport I/O failures, authentication failures and addresses
    rejected by the server. The original exception is chained as
    ``__cause__``.
    """
