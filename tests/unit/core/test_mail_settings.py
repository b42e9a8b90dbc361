"""Tests for the mail settings loader."""

import dataclasses

import pytest

from core.settings import (
    DEFAULT_MAIL_ADDRESS,
    ApplicationSettings,
    MailSettings,
    load_mail_settings,
)


class TestLoadMailSettings:

    def test_defaults_when_keys_are_absent(self):
        mail_settings = load_mail_settings({})

        assert mail_settings.sender == "johndoe@nowhere.com"
        assert mail_settings.recipient == "johndoe@nowhere.com"

    def test_reads_configured_addresses(self):
        mail_settings = load_mail_settings(
            {"MAIL_SENDER": "alice@example.com", "MAIL_RECIPIENT": "bob@example.com"}
        )

        assert mail_settings == MailSettings(sender="alice@example.com", recipient="bob@example.com")

    def test_blank_values_fall_back_to_default(self):
        mail_settings = load_mail_settings({"MAIL_SENDER": "  ", "MAIL_RECIPIENT": ""})

        assert mail_settings.sender == DEFAULT_MAIL_ADDRESS
        assert mail_settings.recipient == DEFAULT_MAIL_ADDRESS

    def test_address_syntax_is_not_validated(self):
        mail_settings = load_mail_settings({"MAIL_RECIPIENT": "not-an-address"})

        assert mail_settings.recipient == "not-an-address"

    def test_snapshot_is_immutable(self):
        mail_settings = load_mail_settings({})

        with pytest.raises(dataclasses.FrozenInstanceError):
            mail_settings.recipient = "other@example.com"

    def test_uses_app_config_inside_application_context(self, make_app):
        app = make_app(MAIL_RECIPIENT="ops@example.com")

        with app.app_context():
            assert load_mail_settings().recipient == "ops@example.com"


class TestApplicationSettings:

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_get_bool_truthy(self, raw):
        assert ApplicationSettings({"MAIL_USE_TLS": raw}).mail_use_tls is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_get_bool_falsy(self, raw):
        assert ApplicationSettings({"MAIL_USE_SSL": raw}).get_bool("MAIL_USE_SSL", True) is False

    def test_get_bool_unknown_value_uses_default(self):
        assert ApplicationSettings({"MAIL_USE_TLS": "maybe"}).get_bool("MAIL_USE_TLS", True) is True

    def test_get_int_invalid_value_uses_default(self):
        assert ApplicationSettings({"MAIL_PORT": "smtp"}).mail_port == 25

    def test_transport_defaults(self):
        env = ApplicationSettings({})

        assert env.mail_provider == "smtp"
        assert env.mail_server == "localhost"
        assert env.mail_port == 25
        assert env.mail_username is None
        assert env.mail_timeout is None
        assert env.log_level == "INFO"

    def test_transport_values(self):
        env = ApplicationSettings(
            {
                "MAIL_PROVIDER": " SMTP ",
                "MAIL_SERVER": "smtp.example.com",
                "MAIL_PORT": "587",
                "MAIL_TIMEOUT": "2.5",
                "LOG_LEVEL": "debug",
            }
        )

        assert env.mail_provider == "smtp"
        assert env.mail_server == "smtp.example.com"
        assert env.mail_port == 587
        assert env.mail_timeout == 2.5
        assert env.log_level == "DEBUG"

    def test_explicit_mapping_ignores_app_config(self, make_app):
        app = make_app(MAIL_SENDER="app@example.com")

        with app.app_context():
            assert ApplicationSettings({}).mail_sender == DEFAULT_MAIL_ADDRESS
