"""Application ports - Interfaces for external adapters."""

from .alert_sink import AlertSink
from .clock import Clock, system_clock
from .credential_repository import CredentialRepository
from .file_change_source import FileChangeSource
from .presenter import Presenter

__all__ = [
    "AlertSink",
    "Clock",
    "CredentialRepository",
    "FileChangeSource",
    "Presenter",
    "system_clock",
]
