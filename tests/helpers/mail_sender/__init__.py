"""Test helpers for mail sender implementations."""

from .console_sender import ConsoleMailSender
from .factory import TestMailSenderFactory
from .recording_sender import RecordingMailSender

__all__ = ["ConsoleMailSender", "RecordingMailSender", "TestMailSenderFactory"]
