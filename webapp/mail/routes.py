from flask import Blueprint, current_app

from application.mail_dispatch import MailDispatchService

bp = Blueprint("mail", __name__)

DISPATCH_EXTENSION_KEY = "mail_dispatch"


def get_dispatch_service() -> MailDispatchService:
    return current_app.extensions[DISPATCH_EXTENSION_KEY]


@bp.get("/")
def send_mail():
    """Send the greeting email to the configured recipient."""
    confirmation = get_dispatch_service().handle_request()
    return confirmation, 200, {"Content-Type": "text/plain; charset=utf-8"}
