"""Tests for the toast notification adapter."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from backend.app.models.notification import NotificationRequest, Severity
from backend.app.services.notifier import LoggingToastSink, Notifier

from .fakes import RecordingToastSink


def test_notify_with_title_only_fills_defaults() -> None:
    sink = RecordingToastSink()

    Notifier(sink).notify(title="Saved")

    assert len(sink.received) == 1
    delivered = sink.received[0]
    assert delivered.title == "Saved"
    assert delivered.description == ""
    assert delivered.icon == "info"
    assert delivered.severity == "primary"


def test_notify_forwards_all_fields_unchanged() -> None:
    sink = RecordingToastSink()

    result = Notifier(sink).notify(
        title="Login failed",
        description="Check your email and password",
        icon="i-lucide-alert-triangle",
        severity=Severity.ERROR,
    )

    assert result is None
    assert sink.received == [
        NotificationRequest(
            title="Login failed",
            description="Check your email and password",
            icon="i-lucide-alert-triangle",
            severity="error",
        )
    ]


@pytest.mark.parametrize("severity", ["primary", "success", "error", "info", "warning", "neutral"])
def test_notify_accepts_every_severity(severity: str) -> None:
    sink = RecordingToastSink()

    Notifier(sink).notify(title="t", severity=severity)

    assert sink.received[0].severity == severity


def test_unknown_severity_is_rejected() -> None:
    with pytest.raises(ValidationError):
        NotificationRequest(title="t", severity="critical")


def test_logging_sink_writes_toast_to_log(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        Notifier(LoggingToastSink()).notify(title="Wishlist updated", severity="success")

    assert "Wishlist updated" in caplog.text
    assert "success" in caplog.text


def test_notification_request_is_immutable_and_closed() -> None:
    request = NotificationRequest(title="Saved")

    with pytest.raises(ValidationError):
        request.title = "Changed"
    with pytest.raises(ValidationError):
        NotificationRequest(title="t", color="primary")
