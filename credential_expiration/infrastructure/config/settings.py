"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from functools import cached_property
from pathlib import Path

from ...application.exceptions import ConfigurationError
from ...domain.exceptions import InvalidThresholdsError
from ...domain.value_objects import ExpirationThresholds
from ..adapters.notifications.desktop import DesktopConfig
from ..adapters.notifications.webhook import WebhookConfig

CREDENTIALS_FILE_ENV = "AWS_SHARED_CREDENTIALS_FILE"


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    raw = os.environ.get(key, str(default))
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from e


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def resolve_credentials_file() -> Path:
    """Location of the shared credentials file.

    ``AWS_SHARED_CREDENTIALS_FILE`` wins, otherwise ``~/.aws/credentials``.
    """
    if override := os.environ.get(CREDENTIALS_FILE_ENV):
        return Path(override).expanduser()
    return Path.home() / ".aws" / "credentials"


@dataclass
class Settings:
    """Application settings container."""

    credentials_file: Path = field(default_factory=resolve_credentials_file)

    # Thresholds
    expiring_window_minutes: int = field(default_factory=lambda: _env_int("EXPIRING_WINDOW_MINUTES", 10))
    obsolete_window_hours: int = field(default_factory=lambda: _env_int("OBSOLETE_WINDOW_HOURS", 24))

    # Run configuration
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    tray_enabled: bool = field(default_factory=lambda: _env_bool("TRAY_ENABLED", default=True))

    # Desktop notification settings
    desktop_notifications_enabled: bool = field(
        default_factory=lambda: _env_bool("DESKTOP_NOTIFICATIONS_ENABLED", default=True)
    )

    # Webhook settings
    webhook_enabled: bool = field(default_factory=lambda: _env_bool("WEBHOOK_ENABLED"))
    webhook_url: str = field(default_factory=lambda: _env_str("WEBHOOK_URL"))

    def validate(self) -> None:
        """Validate settings."""
        try:
            _ = self.thresholds
        except InvalidThresholdsError as e:
            raise ConfigurationError(str(e)) from e

        if self.webhook_enabled and not self.webhook_url:
            msg = "WEBHOOK_URL is required when WEBHOOK_ENABLED is set"
            raise ConfigurationError(msg)

    @cached_property
    def thresholds(self) -> ExpirationThresholds:
        """Get expiration thresholds."""
        return ExpirationThresholds(
            expiring=timedelta(minutes=self.expiring_window_minutes),
            obsolete=timedelta(hours=self.obsolete_window_hours),
        )

    @cached_property
    def desktop_config(self) -> DesktopConfig:
        """Get desktop notification configuration."""
        return DesktopConfig(enabled=self.desktop_notifications_enabled)

    @cached_property
    def webhook_config(self) -> WebhookConfig:
        """Get webhook configuration."""
        return WebhookConfig(
            enabled=self.webhook_enabled,
            url=self.webhook_url,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
