"""Use case keeping the displayed status in sync with the credentials file."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from ..exceptions import SubscriptionError
from ..services import EventScheduler

if TYPE_CHECKING:
    from ..ports import FileChangeSource
    from .refresh_expiration_status import RefreshExpirationStatus, RefreshResult

logger = logging.getLogger(__name__)


class _EventKind(Enum):
    FILE_CHANGED = auto()
    BOUNDARY_REACHED = auto()
    SUBSCRIPTION_FAILED = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class _Event:
    kind: _EventKind
    generation: int = 0
    error: Exception | None = None


class CredentialFileWatcher:
    """
    Sequential event loop driving refresh cycles.

    File changes, boundary timers and the close signal are funnelled into a
    single queue and handled one at a time, so refresh cycles never overlap.
    Any error raised by a cycle or by the file subscription stops the loop
    and is raised from ``run()``.
    """

    def __init__(
        self,
        refresh: RefreshExpirationStatus,
        change_source: FileChangeSource,
    ) -> None:
        """
        Initialize the watcher.

        Args:
            refresh: Use case executed on every event.
            change_source: Notifications for writes to the credentials file.
        """
        self._refresh = refresh
        self._change_source = change_source
        self._scheduler = EventScheduler(refresh.thresholds, refresh.clock, self._on_boundary)
        self._queue: asyncio.Queue[_Event] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._close_requested = False
        self._stopping = False
        self._cycles = 0
        self._last_result: RefreshResult | None = None

    @property
    def cycles(self) -> int:
        """Number of refresh cycles completed."""
        return self._cycles

    @property
    def last_result(self) -> RefreshResult | None:
        """Result of the most recent refresh cycle."""
        return self._last_result

    @property
    def scheduler(self) -> EventScheduler:
        """Scheduler arming the boundary timers."""
        return self._scheduler

    async def run(self) -> None:
        """
        Watch the credentials file until closed.

        Returns normally after ``close()``.

        Raises:
            CredentialRepositoryError: If the file cannot be loaded.
            SubscriptionError: If the file cannot be watched.
            NotificationError: If an alert cannot be delivered.
        """
        if self._loop is not None:
            msg = "CredentialFileWatcher.run() can only be called once"
            raise RuntimeError(msg)
        self._loop = asyncio.get_running_loop()
        if self._close_requested:
            self._queue.put_nowait(_Event(_EventKind.CLOSE))

        subscription = asyncio.create_task(self._forward_changes(), name="credential-file-changes")
        try:
            # Let the subscription start watching before the first load
            await asyncio.sleep(0)
            await self._run_cycle("startup")
            while True:
                event = await self._queue.get()
                match event.kind:
                    case _EventKind.CLOSE:
                        logger.info("Close requested, stopping credentials watcher")
                        return
                    case _EventKind.SUBSCRIPTION_FAILED:
                        raise event.error or SubscriptionError("File change subscription failed")
                    case _EventKind.FILE_CHANGED:
                        self._scheduler.cancel_all()
                        await self._run_cycle("file changed")
                    case _EventKind.BOUNDARY_REACHED:
                        if not self._scheduler.is_current(event.generation):
                            logger.debug("Ignoring stale boundary (generation %d)", event.generation)
                            continue
                        await self._run_cycle("boundary reached")
        except Exception:
            logger.exception("Credentials watcher stopped after %d cycles", self._cycles)
            raise
        finally:
            self._stopping = True
            self._scheduler.cancel_all()
            self._change_source.close()
            subscription.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await subscription

    def close(self) -> None:
        """Ask the loop to stop. Safe to call from any thread."""
        if self._loop is None:
            self._close_requested = True
            return
        if self._stopping or self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._queue.put_nowait, _Event(_EventKind.CLOSE))

    async def _run_cycle(self, reason: str) -> None:
        result = await self._refresh.execute()
        boundaries = self._scheduler.reschedule(
            result.credentials, result.classification.evaluated_at
        )
        self._cycles += 1
        self._last_result = result
        logger.info(
            "Refresh cycle %d (%s): state=%s, %d boundaries armed",
            self._cycles,
            reason,
            result.classification.aggregate_state,
            len(boundaries),
        )

    def _on_boundary(self, generation: int) -> None:
        self._queue.put_nowait(_Event(_EventKind.BOUNDARY_REACHED, generation=generation))

    async def _forward_changes(self) -> None:
        try:
            async for _ in self._change_source.changes():
                self._queue.put_nowait(_Event(_EventKind.FILE_CHANGED))
        except Exception as e:
            self._queue.put_nowait(_Event(_EventKind.SUBSCRIPTION_FAILED, error=e))
            return

        if not self._stopping:
            error = SubscriptionError("File change subscription ended unexpectedly")
            self._queue.put_nowait(_Event(_EventKind.SUBSCRIPTION_FAILED, error=error))
