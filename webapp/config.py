import os

from dotenv import load_dotenv

from core.settings import ApplicationSettings, DEFAULT_MAIL_ADDRESS

load_dotenv()

_env = ApplicationSettings(os.environ)


class BaseApplicationSettings:
    """Base Flask application configuration populated from the environment."""

    SECRET_KEY = _env.get_str("SECRET_KEY", "dev")

    # Addresses used for the greeting email
    MAIL_SENDER = _env.mail_sender
    MAIL_RECIPIENT = _env.mail_recipient

    # Transport (Flask-Mailman)
    MAIL_PROVIDER = _env.mail_provider
    MAIL_BACKEND = _env.mail_backend
    MAIL_SERVER = _env.mail_server
    MAIL_PORT = _env.mail_port
    MAIL_USERNAME = _env.mail_username
    MAIL_PASSWORD = _env.mail_password
    MAIL_USE_TLS = _env.mail_use_tls
    MAIL_USE_SSL = _env.mail_use_ssl
    MAIL_TIMEOUT = _env.mail_timeout
    MAIL_DEFAULT_SENDER = MAIL_SENDER

    LOG_LEVEL = _env.log_level


class TestConfig(BaseApplicationSettings):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    MAIL_SENDER = DEFAULT_MAIL_ADDRESS
    MAIL_RECIPIENT = DEFAULT_MAIL_ADDRESS
    MAIL_DEFAULT_SENDER = DEFAULT_MAIL_ADDRESS
    MAIL_PROVIDER = "smtp"
    MAIL_BACKEND = "locmem"
    MAIL_SERVER = "localhost"
    MAIL_PORT = 25
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    MAIL_USE_TLS = False
    MAIL_USE_SSL = False
    MAIL_TIMEOUT = None
