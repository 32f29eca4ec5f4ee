"""Desktop notification alert sink."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

from plyer import notification

from ....application.exceptions import NotificationError
from .base import BaseAlertSink

if TYPE_CHECKING:
    from ....domain.services import Alert


@dataclass(frozen=True, slots=True)
class DesktopConfig:
    """Desktop notification configuration."""

    enabled: bool = True
    app_name: str = "aws_credential_expiration"
    timeout: int = 10


class DesktopAlertSink(BaseAlertSink):
    """Show alerts as native desktop notifications."""

    def __init__(self, config: DesktopConfig) -> None:
        """Initialize the desktop sink."""
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        """Check if desktop notifications are enabled."""
        return self._config.enabled

    async def push(self, alert: Alert) -> None:
        """Show the alert, raising NotificationError if no notification could be shown."""
        try:
            await asyncio.to_thread(
                notification.notify,
                title=alert.title,
                message=alert.message,
                app_name=self._config.app_name,
                timeout=self._config.timeout,
            )
        except Exception as e:
            msg = f"Failed to show desktop notification: {e}"
            self._logger.exception(msg)
            raise NotificationError(msg) from e

        self._logger.info("Desktop notification shown: %s", alert.message)
