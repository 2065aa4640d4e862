"""Notification gateway port.

The use-case layer decides *when* to notify and calls any object that
satisfies ``UpcomingOutputGateway``; implementations decide *how* the
notification is delivered.
"""

from typing import Protocol, runtime_checkable

from collection_notifier.models.result import NotifyResult
from collection_notifier.models.service import ServiceEvent


@runtime_checkable
class UpcomingOutputGateway(Protocol):
    """Delivers notifications about upcoming collections."""

    def notify(self, event: ServiceEvent) -> NotifyResult:
        """Send a notification for ``event``.

        Returns:
            ``Delivered`` on success, ``NotifyError`` on any failure.
        """
        ...
