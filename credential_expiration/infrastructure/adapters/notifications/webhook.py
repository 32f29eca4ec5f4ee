"""Generic webhook alert sink."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from ....application.exceptions import NotificationError
from .base import BaseAlertSink

if TYPE_CHECKING:
    from ....domain.services import Alert


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Webhook notification configuration."""

    enabled: bool = False
    url: str = ""
    timeout: float = 30.0


class WebhookAlertSink(BaseAlertSink):
    """Send alerts via generic HTTP webhook with JSON payload."""

    def __init__(
        self,
        config: WebhookConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the webhook sink.

        Args:
            config: Webhook configuration.
            transport: Optional transport override for the HTTP client.
        """
        super().__init__()
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if webhook is properly configured."""
        return self._config.enabled and bool(self._config.url)

    async def push(self, alert: Alert) -> None:
        """Post the alert as JSON, raising NotificationError on any failure."""
        if not self.is_configured():
            msg = "Webhook sink not configured"
            raise NotificationError(msg)

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._config.url,
                    json=self._build_payload(alert),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            msg = f"Failed to send webhook alert to {self._config.url}: {e}"
            self._logger.exception(msg)
            raise NotificationError(msg) from e

        self._logger.info("Webhook alert sent to %s", self._config.url)

    def _build_payload(self, alert: Alert) -> dict:
        """Build the JSON payload for the webhook."""
        return {
            "event_type": "aws_credential_expiration_alert",
            "timestamp": datetime.now(UTC).isoformat(),
            "state": str(alert.state),
            "title": alert.title,
            "message": alert.message,
        }
