"""Timers for the instants at which profile classifications change."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from ...domain.services import next_boundaries

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ...domain.entities import Profile
    from ...domain.value_objects import ExpirationThresholds
    from ..ports import Clock

logger = logging.getLogger(__name__)

# Timers must never fire before the boundary they target
TIMER_SLACK = timedelta(milliseconds=1)


class EventScheduler:
    """
    Arms one-shot timers for upcoming classification boundaries.

    Every call to ``reschedule`` or ``cancel_all`` starts a new generation.
    A timer only reports back if its generation is still the current one, so
    a timer that was already due when it got superseded never triggers work
    against newer data.
    """

    def __init__(
        self,
        thresholds: ExpirationThresholds,
        clock: Clock,
        on_boundary: Callable[[int], None],
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            thresholds: Expiration thresholds used to derive boundaries.
            clock: Source of the current time.
            on_boundary: Called with the timer generation when a boundary is reached.
        """
        self._thresholds = thresholds
        self._clock = clock
        self._on_boundary = on_boundary
        self._handles: dict[datetime, asyncio.TimerHandle] = {}
        self._generation = 0

    @property
    def thresholds(self) -> ExpirationThresholds:
        """Thresholds the boundaries are derived from."""
        return self._thresholds

    @property
    def generation(self) -> int:
        """Generation of the currently armed timers."""
        return self._generation

    @property
    def pending(self) -> int:
        """Number of armed timers that have neither fired nor been cancelled."""
        return len(self._handles)

    def is_current(self, generation: int) -> bool:
        """Check if ``generation`` belongs to the currently armed timers."""
        return generation == self._generation

    def cancel_all(self) -> None:
        """Cancel every armed timer and invalidate its generation."""
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()
        self._generation += 1

    def reschedule(self, credentials: Mapping[str, Profile], now: datetime) -> list[datetime]:
        """
        Replace all armed timers with timers for the boundaries after ``now``.

        Args:
            credentials: Profiles of the cycle that just ran.
            now: Evaluation instant of that cycle.

        Returns:
            The boundaries that were armed, earliest first.
        """
        self.cancel_all()
        boundaries = next_boundaries(credentials, now, self._thresholds)

        loop = asyncio.get_running_loop()
        generation = self._generation
        current_time = self._clock()
        for instant in boundaries:
            delay = max(instant - current_time, timedelta(0)) + TIMER_SLACK
            handle = loop.call_later(delay.total_seconds(), self._fire, generation, instant)
            self._handles[instant] = handle

        if boundaries:
            logger.debug(
                "Armed %d timers (generation %d), next at %s",
                len(boundaries),
                generation,
                boundaries[0].isoformat(),
            )
        else:
            logger.debug("No upcoming boundaries (generation %d)", generation)
        return boundaries

    def _fire(self, generation: int, instant: datetime) -> None:
        if not self.is_current(generation):
            return
        self._handles.pop(instant, None)
        logger.debug("Boundary reached: %s", instant.isoformat())
        self._on_boundary(generation)
