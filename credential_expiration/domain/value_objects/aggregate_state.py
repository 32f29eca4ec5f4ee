"""Aggregate state value object."""

from enum import IntEnum


class AggregateState(IntEnum):
    """Worst-case status over all reported profiles.

    Ordered so that ``max()`` over a set of states yields the most severe one.
    """

    CURRENT = 0
    EXPIRING = 1
    EXPIRED = 2

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.name.capitalize()

    @property
    def color_hex(self) -> str:
        """Get hex color code used for the tray icon."""
        match self:
            case AggregateState.EXPIRED:
                return "#dc3545"
            case AggregateState.EXPIRING:
                return "#ffc107"
            case AggregateState.CURRENT:
                return "#28a745"

    def __str__(self) -> str:
        return self.name.lower()
