"""Unit tests for recovery code delivery."""

import logging

import pytest

from photoshare.adapter.mail.log import (
    LoggingRecoveryCodeSender,
    RecordingRecoveryCodeSender,
)
from tests.conftest import make_user


@pytest.mark.asyncio
async def test_logging_sender_writes_code_to_log(caplog):
    caplog.set_level(logging.INFO, logger="photoshare.adapter.mail.log")

    await LoggingRecoveryCodeSender().send_recovery_code(make_user("alice"), "c0de")

    assert "alice@example.com" in caplog.text
    assert "c0de" in caplog.text


@pytest.mark.asyncio
async def test_recording_sender_keeps_email_and_code():
    sender = RecordingRecoveryCodeSender()

    await sender.send_recovery_code(make_user("bob"), "c0de")

    assert sender.sent == [("bob@example.com", "c0de")]
