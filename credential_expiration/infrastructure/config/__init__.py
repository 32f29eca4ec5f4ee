"""Configuration."""

from .settings import Settings, load_settings, resolve_credentials_file

__all__ = [
    "Settings",
    "load_settings",
    "resolve_credentials_file",
]
