"""Tests for the flask CLI commands."""

from domain.mail_sender import MessagingError
from tests.helpers.mail_sender import RecordingMailSender


class TestMailCommands:

    def test_send_mail_command(self, make_app, recording_sender):
        app = make_app(MAIL_RECIPIENT="cli@example.com")

        result = app.test_cli_runner().invoke(args=["send-mail"])

        assert result.exit_code == 0
        assert "Email sent to cli@example.com" in result.output
        assert len(recording_sender.sent_messages) == 1

    def test_send_mail_command_failure(self, make_app):
        app = make_app(mail_sender=RecordingMailSender(should_fail=True))

        result = app.test_cli_runner().invoke(args=["send-mail"])

        assert result.exit_code != 0
        assert isinstance(result.exception, MessagingError)

    def test_mail_config_command(self, make_app):
        app = make_app(MAIL_SENDER="from@example.com", MAIL_SERVER="smtp.example.com", MAIL_PORT=2525)

        result = app.test_cli_runner().invoke(args=["mail-config"])

        assert result.exit_code == 0
        assert "Sender: from@example.com" in result.output
        assert "Recipient: johndoe@nowhere.com" in result.output
        assert "Server: smtp.example.com:2525" in result.output
