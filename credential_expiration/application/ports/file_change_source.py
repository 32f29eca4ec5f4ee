"""Port for file change notifications - driving/primary port."""

from collections.abc import AsyncIterator
from typing import Protocol


class FileChangeSource(Protocol):
    """Port producing a notification each time the credentials file is written."""

    def changes(self) -> AsyncIterator[None]:
        """
        Yield once per batch of writes to the watched file.

        Iteration ends when the source is closed.

        Raises:
            SubscriptionError: If the file cannot be watched.
        """
        ...

    def close(self) -> None:
        """Stop watching and end iteration of ``changes()``."""
        ...
