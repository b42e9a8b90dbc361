# webapp/__init__.py
import time
from typing import Optional

from flask import Flask, g

from core.logging_config import configure_logging
from core.settings import load_mail_settings
from domain.mail_sender import MailSender

from .error_handlers import register_error_handlers
from .extensions import mail as mail_extension
from .mail.routes import DISPATCH_EXTENSION_KEY


def create_app(config=None, *, mail_sender: Optional[MailSender] = None):
    """アプリケーションファクトリ

    Args:
        config: Config object (class or module) loaded with ``from_object``;
            defaults to :class:`webapp.config.BaseApplicationSettings`.
        mail_sender: Transport to use instead of the one built from
            ``MAIL_PROVIDER``.
    """
    from dotenv import load_dotenv
    from application.mail_dispatch import MailDispatchService
    from infrastructure.mail_sender import MailSenderFactory

    # .env を読み込む（環境変数が未設定の場合のみ）
    load_dotenv()

    app = Flask(__name__)
    if config is None:
        from .config import BaseApplicationSettings

        config = BaseApplicationSettings
    app.config.from_object(config)

    configure_logging(app)

    # 拡張初期化
    mail_extension.init_app(app)

    if mail_sender is None:
        with app.app_context():
            mail_sender = MailSenderFactory.create(mail=mail_extension)

    mail_settings = load_mail_settings(app.config)
    app.extensions[DISPATCH_EXTENSION_KEY] = MailDispatchService(
        sender=mail_sender,
        mail_settings=mail_settings,
    )
    app.logger.info(
        "Mail dispatch configured: sender=%s recipient=%s",
        mail_settings.sender,
        mail_settings.recipient,
        extra={"event": "app.mail.configured"},
    )

    register_error_handlers(app)

    # Blueprint 登録
    from .mail import bp as mail_bp
    app.register_blueprint(mail_bp)

    # 認証なしの健康チェック用Blueprint
    from .health import health_bp
    app.register_blueprint(health_bp, url_prefix="/health")

    # CLI コマンド登録
    register_cli_commands(app)

    @app.before_request
    def start_timer():
        g.start_time = time.perf_counter()

    @app.after_request
    def add_server_timing(response):
        start = getattr(g, "start_time", None)
        if start is not None:
            duration = (time.perf_counter() - start) * 1000
            response.headers["Server-Timing"] = f"app;dur={duration:.2f}"
        return response

    return app


def register_cli_commands(app):
    """CLI コマンドを登録"""
    import click

    from .mail.routes import get_dispatch_service

    @app.cli.command("send-mail")
    def send_mail_command():
        """Send the greeting email once, as ``GET /`` does."""
        click.echo(get_dispatch_service().handle_request())

    @app.cli.command("mail-config")
    def show_mail_config():
        """Show the sender/recipient pair and the SMTP endpoint in use."""
        mail_settings = get_dispatch_service().mail_settings
        click.echo(f"Sender: {mail_settings.sender}")
        click.echo(f"Recipient: {mail_settings.recipient}")
        click.echo(f"Provider: {app.config.get('MAIL_PROVIDER')}")
        click.echo(f"Server: {app.config.get('MAIL_SERVER')}:{app.config.get('MAIL_PORT')}")
