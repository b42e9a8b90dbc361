"""Centralised application settings abstraction.

This module exposes :class:`ApplicationSettings` which consolidates the
configuration lookups of the service.  The class treats the process
environment (or any mapping provided) as the backing store, returning value
objects and sensible defaults where appropriate.

The global :data:`settings` instance should be used for production code, while
tests can instantiate their own :class:`ApplicationSettings` with a dedicated
mapping to validate behaviour in isolation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, cast, TYPE_CHECKING

from flask import current_app, has_app_context

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask

DEFAULT_MAIL_ADDRESS = "johndoe@nowhere.com"
DEFAULT_MAIL_PROVIDER = "smtp"

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, object]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, object]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[object] = None) -> Optional[object]:
        return self.source.get(key, default)


@dataclass(frozen=True)
class MailSettings:
    """Sender and recipient used for every outbound message.

    Built once at startup and shared read-only by all requests, so a request
    always sees a consistent ``(sender, recipient)`` pair.
    """

    sender: str = DEFAULT_MAIL_ADDRESS
    recipient: str = DEFAULT_MAIL_ADDRESS


class ApplicationSettings:
    """Domain level representation of configuration values.

    The class favours explicit properties instead of generic ``get`` access so
    that the rest of the application operates on intent-revealing names.

    When constructed without a mapping, values configured on the active Flask
    application take precedence over the process environment.
    """

    def __init__(self, env: Optional[Mapping[str, object]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)
        self._follow_app_config = env is None

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default: Optional[object] = None):
        if self._follow_app_config and has_app_context():
            app = cast("Flask", current_app)
            if key in app.config:
                return app.config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value
        return default

    def get(self, key: str, default=None):
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a string value, treating blank strings as unset."""

        value = self._get(key)
        if value is None:
            return default
        text = str(value).strip()
        return text or default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in _BOOL_TRUE:
                return True
            if normalised in _BOOL_FALSE:
                return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer configuration value."""

        value = self._get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        value = self._get(key)
        if value is None or value == "":
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    # ------------------------------------------------------------------
    # Mail addresses
    # ------------------------------------------------------------------
    @property
    def mail_sender(self) -> str:
        return self.get_str("MAIL_SENDER", DEFAULT_MAIL_ADDRESS)

    @property
    def mail_recipient(self) -> str:
        return self.get_str("MAIL_RECIPIENT", DEFAULT_MAIL_ADDRESS)

    def mail(self) -> MailSettings:
        """Return an immutable snapshot of the sender/recipient pair."""

        return MailSettings(sender=self.mail_sender, recipient=self.mail_recipient)

    # ------------------------------------------------------------------
    # Mail transport
    # ------------------------------------------------------------------
    @property
    def mail_provider(self) -> str:
        return self.get_str("MAIL_PROVIDER", DEFAULT_MAIL_PROVIDER).lower()

    @property
    def mail_backend(self) -> str:
        return self.get_str("MAIL_BACKEND", "smtp")

    @property
    def mail_server(self) -> str:
        return self.get_str("MAIL_SERVER", "localhost")

    @property
    def mail_port(self) -> int:
        return self.get_int("MAIL_PORT", 25)

    @property
    def mail_username(self) -> Optional[str]:
        return self.get_str("MAIL_USERNAME")

    @property
    def mail_password(self) -> Optional[str]:
        return self.get_str("MAIL_PASSWORD")

    @property
    def mail_use_tls(self) -> bool:
        return self.get_bool("MAIL_USE_TLS", False)

    @property
    def mail_use_ssl(self) -> bool:
        return self.get_bool("MAIL_USE_SSL", False)

    @property
    def mail_timeout(self) -> Optional[float]:
        return self.get_float("MAIL_TIMEOUT")

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    @property
    def log_level(self) -> str:
        return self.get_str("LOG_LEVEL", "INFO").upper()


def load_mail_settings(source: Optional[Mapping[str, object]] = None) -> MailSettings:
    """Build a :class:`MailSettings` snapshot from *source*.

    ``source`` may be any mapping, typically ``app.config`` or ``os.environ``;
    when omitted the global :data:`settings` lookup is used.
    """

    accessor = settings if source is None else ApplicationSettings(source)
    return accessor.mail()


settings = ApplicationSettings()
