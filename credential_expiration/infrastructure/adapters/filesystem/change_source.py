"""File change notifications backed by watchfiles."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from watchfiles import Change, awatch

from ....application.exceptions import SubscriptionError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


class WatchfilesChangeSource:
    """
    Watches a single file for writes.

    The parent directory is watched rather than the file itself so that
    replacing the file (write to a temporary file, then rename) is still
    reported.
    """

    def __init__(self, path: Path | str, *, debounce_ms: int = 1600, step_ms: int = 50) -> None:
        """
        Initialize the change source.

        Args:
            path: File to watch.
            debounce_ms: Upper bound on how long a batch of changes is collected.
            step_ms: Quiet period that ends a batch of changes.
        """
        self._path = Path(path).expanduser().resolve()
        self._debounce_ms = debounce_ms
        self._step_ms = step_ms
        self._stop_event = asyncio.Event()

    @property
    def path(self) -> Path:
        """Resolved path of the watched file."""
        return self._path

    def _is_target(self, change: Change, path: str) -> bool:
        return Path(path).resolve() == self._path

    async def changes(self) -> AsyncIterator[None]:
        """
        Yield once per batch of changes touching the watched file.

        Raises:
            SubscriptionError: If the file cannot be watched.
        """
        directory = self._path.parent
        logger.info("Watching %s for changes", self._path)
        try:
            async for batch in awatch(
                directory,
                watch_filter=self._is_target,
                debounce=self._debounce_ms,
                step=self._step_ms,
                stop_event=self._stop_event,
                recursive=False,
            ):
                logger.debug("Detected %d changes to %s", len(batch), self._path)
                yield
        except (OSError, RuntimeError) as e:
            msg = f"Cannot watch {self._path}: {e}"
            logger.error(msg)
            raise SubscriptionError(msg) from e

    def close(self) -> None:
        """Stop watching."""
        self._stop_event.set()
