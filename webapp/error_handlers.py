"""Centralized HTTP error handling."""

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException, InternalServerError, default_exceptions

from domain.mail_sender import MessagingError

_SERVER_ERROR_BODY = "Internal Server Error"


def _server_error_response(code: int = 500):
    return _SERVER_ERROR_BODY, code, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    """Register global error handlers.

    Mail transport failures and any other unhandled exception become a plain
    text 500; 5xx details are never exposed to the client.
    """

    @app.errorhandler(MessagingError)
    def handle_messaging_error(error):
        current_app.logger.error(
            "Mail dispatch failed for %s %s",
            request.method,
            request.path,
            exc_info=error,
            extra={"event": "mail.dispatch.failed"},
        )
        return _server_error_response()

    @app.errorhandler(404)
    def handle_404(error):
        current_app.logger.warning(
            "404 path=%s full=%s ua=%s",
            request.path,
            request.full_path,
            request.user_agent,
        )
        return jsonify(error="Not Found"), 404

    def handle_server_errors(error):
        code = getattr(error, "code", 500)
        current_app.logger.error(
            "%s %s (%s)", code, request.path, request.remote_addr, exc_info=error
        )
        return _server_error_response(code)

    server_error_status_codes = [
        status_code for status_code in default_exceptions if 500 <= status_code < 600
    ]
    for status_code in server_error_status_codes:
        app.register_error_handler(status_code, handle_server_errors)

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return error
        current_app.logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.path,
            extra={"event": "api.http_5xx"},
        )
        return _server_error_response()

    app.register_error_handler(InternalServerError, handle_server_errors)
