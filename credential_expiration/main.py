#!/usr/bin/env python3
"""
AWS Credential Expiration Monitor

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .application.exceptions import ApplicationError
from .application.use_cases import CredentialFileWatcher, RefreshExpirationStatus
from .infrastructure.adapters import (
    DesktopAlertSink,
    IniCredentialRepository,
    LogPresenter,
    WatchfilesChangeSource,
    WebhookAlertSink,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import AlertSink, Presenter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_credential_repository(self) -> IniCredentialRepository:
        """Create the credentials file repository adapter."""
        return IniCredentialRepository(self._settings.credentials_file)

    def create_change_source(self) -> WatchfilesChangeSource:
        """Create the file change notification adapter."""
        return WatchfilesChangeSource(self._settings.credentials_file)

    def create_alert_sinks(self) -> list[AlertSink]:
        """Create all configured alert sink adapters."""
        sinks: list[AlertSink] = [
            DesktopAlertSink(self._settings.desktop_config),
            WebhookAlertSink(self._settings.webhook_config),
        ]

        configured = [s for s in sinks if s.is_configured()]
        logger.info(
            "Configured alert sinks: %s",
            [s.__class__.__name__ for s in configured] or "None",
        )

        return sinks

    def create_watcher(self, presenter: Presenter) -> CredentialFileWatcher:
        """Create the watch loop with all dependencies."""
        refresh = RefreshExpirationStatus(
            credential_repository=self.create_credential_repository(),
            presenter=presenter,
            alert_sinks=self.create_alert_sinks(),
            thresholds=self._settings.thresholds,
        )
        return CredentialFileWatcher(refresh, self.create_change_source())


class Application:
    """
    Main application orchestrator.

    Runs the watch loop either behind a tray icon or headless.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def watch(self, watcher: CredentialFileWatcher) -> int:
        """Run the watch loop until it is closed or fails."""
        logger.info("Monitoring %s", self._settings.credentials_file)
        try:
            await watcher.run()
        except ApplicationError as e:
            logger.error("Monitoring stopped: %s", e)
            return 1
        return 0

    def run_headless(self) -> int:
        """Run without a tray icon, reporting state through the log."""
        watcher = self._container.create_watcher(LogPresenter())
        return asyncio.run(self.watch(watcher))

    def run_with_tray(self) -> int:
        """Run the watch loop in a worker thread behind a tray icon."""
        from .infrastructure.adapters.presenters.tray import TrayPresenter

        exit_codes: list[int] = []
        watcher: CredentialFileWatcher | None = None

        def quit_requested() -> None:
            if watcher is not None:
                watcher.close()

        tray = TrayPresenter(on_quit=quit_requested)
        watcher = self._container.create_watcher(tray)

        def watch_in_background() -> None:
            try:
                exit_codes.append(asyncio.run(self.watch(watcher)))
            finally:
                tray.stop()

        tray.run(setup=watch_in_background)
        return exit_codes[0] if exit_codes else 1

    def run(self) -> int:
        """
        Run the application based on configuration.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if self._settings.tray_enabled:
            return self.run_with_tray()
        return self.run_headless()


def main() -> None:
    """Main entry point."""
    try:
        logger.info("AWS Credential Expiration Monitor %s starting...", __version__)

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        exit_code = Application(settings).run()

    except ApplicationError as e:
        logger.error("Configuration error: %s", e)
        exit_code = 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        exit_code = 0
    except Exception:
        logger.exception("Unexpected error")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
