"""System tray presenter backed by pystray."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pystray

from ....domain.value_objects import AggregateState
from .icons import create_icon_image

logger = logging.getLogger(__name__)

APP_NAME = "aws_credential_expiration"


class TrayPresenter:
    """
    Shows the aggregate state as a coloured tray icon with a tooltip.

    ``run`` blocks the calling thread, which must be the main thread on
    macOS. State updates may come from any thread.
    """

    def __init__(self, on_quit: Callable[[], None] | None = None) -> None:
        """
        Initialize the tray icon.

        Args:
            on_quit: Called when the user picks Quit from the tray menu.
        """
        self._on_quit = on_quit
        self._icon = pystray.Icon(
            APP_NAME,
            icon=create_icon_image(AggregateState.CURRENT),
            title=APP_NAME,
            menu=pystray.Menu(pystray.MenuItem("Quit", self._quit)),
        )

    def set_icon(self, state: AggregateState) -> None:
        self._icon.icon = create_icon_image(state)

    def set_tooltip(self, text: str) -> None:
        self._icon.title = text or APP_NAME

    def run(self, setup: Callable[[], None]) -> None:
        """Show the icon and block until ``stop`` is called.

        ``setup`` runs in a separate thread once the icon is visible.
        """

        def _setup(icon: pystray.Icon) -> None:
            icon.visible = True
            setup()

        self._icon.run(setup=_setup)

    def stop(self) -> None:
        """Remove the icon and make ``run`` return."""
        self._icon.stop()

    def _quit(self, icon: pystray.Icon, item: pystray.MenuItem) -> None:
        logger.info("Quit selected from tray menu")
        if self._on_quit is not None:
            self._on_quit()
        else:
            self.stop()
