"""Clock port."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(UTC)
