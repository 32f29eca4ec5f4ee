"""Credentials file adapter."""

from .repository import EXPIRATION_KEY, IniCredentialRepository, parse_rfc3339

__all__ = [
    "EXPIRATION_KEY",
    "IniCredentialRepository",
    "parse_rfc3339",
]
