"""Infrastructure adapters - Implementations of application ports."""

from .credentials_file import IniCredentialRepository
from .filesystem import WatchfilesChangeSource
from .notifications import DesktopAlertSink, WebhookAlertSink
from .presenters import LogPresenter

__all__ = [
    "DesktopAlertSink",
    "IniCredentialRepository",
    "LogPresenter",
    "WatchfilesChangeSource",
    "WebhookAlertSink",
]
