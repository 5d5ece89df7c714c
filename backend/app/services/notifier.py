import logging
from abc import ABC, abstractmethod

from ..models.notification import DEFAULT_ICON, NotificationRequest, Severity

logger = logging.getLogger(__name__)


class ToastSink(ABC):
    @abstractmethod
    def add(self, notification: NotificationRequest) -> None:
        """Display a toast. Fire-and-forget, no acknowledgement."""
        pass


class LoggingToastSink(ToastSink):
    """Default sink when no presentation layer is attached: toasts go to the log."""

    def add(self, notification: NotificationRequest) -> None:
        logger.info(
            "Toast [%s] %s: %s (icon=%s)",
            notification.severity,
            notification.title,
            notification.description,
            notification.icon,
        )


class Notifier:
    def __init__(self, sink: ToastSink):
        self.sink = sink

    def notify(
            self,
            title: str,
            description: str = "",
            icon: str = DEFAULT_ICON,
            severity: Severity | str = Severity.PRIMARY,
    ) -> None:
        """Build a notification request and forward it unchanged to the toast sink."""
        self.sink.add(NotificationRequest(title=title, description=description, icon=icon, severity=severity))
