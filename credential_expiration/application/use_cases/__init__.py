"""Application use cases."""

from .refresh_expiration_status import RefreshExpirationStatus, RefreshResult
from .watch_credentials_file import CredentialFileWatcher

__all__ = [
    "CredentialFileWatcher",
    "RefreshExpirationStatus",
    "RefreshResult",
]
