"""Port for alert delivery - driven/secondary port."""

from typing import Protocol

from ...domain.services import Alert


class AlertSink(Protocol):
    """
    Port for delivering alerts to the user.

    This is a driven (secondary) port that defines how the application
    pushes an alert to a notification system.
    """

    async def push(self, alert: Alert) -> None:
        """
        Deliver an alert.

        Args:
            alert: The alert to deliver.

        Raises:
            NotificationError: If delivery fails.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this alert sink is properly configured.

        Returns:
            True if the sink is ready to deliver alerts.
        """
        ...
