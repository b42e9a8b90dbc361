import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.helpers.mail_sender import RecordingMailSender  # noqa: E402


@pytest.fixture
def recording_sender():
    """送信内容を記録するテスト用メール送信実装"""
    return RecordingMailSender()


@pytest.fixture
def make_app(recording_sender):
    """Build an app from TestConfig, optionally overriding config keys."""
    from webapp import create_app
    from webapp.config import TestConfig

    def _make_app(mail_sender=recording_sender, **overrides):
        config = type("OverriddenTestConfig", (TestConfig,), overrides)
        return create_app(config, mail_sender=mail_sender)

    return _make_app


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
