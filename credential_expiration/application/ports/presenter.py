"""Port for presenting the current state - driven/secondary port."""

from typing import Protocol

from ...domain.value_objects import AggregateState


class Presenter(Protocol):
    """Port for the on-screen indicator (icon and tooltip)."""

    def set_icon(self, state: AggregateState) -> None:
        """Show the icon matching ``state``."""
        ...

    def set_tooltip(self, text: str) -> None:
        """Replace the tooltip text."""
        ...
