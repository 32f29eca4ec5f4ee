"""Presenter writing state changes to the log, for headless runs."""

import logging

from ....domain.value_objects import AggregateState


class LogPresenter:
    """Presenter implementation that logs instead of drawing a tray icon."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._state: AggregateState | None = None
        self._tooltip = ""

    @property
    def state(self) -> AggregateState | None:
        """Last state shown."""
        return self._state

    @property
    def tooltip(self) -> str:
        """Last tooltip shown."""
        return self._tooltip

    def set_icon(self, state: AggregateState) -> None:
        if state != self._state:
            self._logger.info("Status: %s", state.label)
        self._state = state

    def set_tooltip(self, text: str) -> None:
        if text != self._tooltip:
            self._logger.info("Profiles:\n%s", text or "(none)")
        self._tooltip = text
