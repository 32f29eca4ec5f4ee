"""Alert sink adapter implementations."""

from .base import BaseAlertSink
from .desktop import DesktopAlertSink, DesktopConfig
from .webhook import WebhookAlertSink, WebhookConfig

__all__ = [
    "BaseAlertSink",
    "DesktopAlertSink",
    "DesktopConfig",
    "WebhookAlertSink",
    "WebhookConfig",
]
