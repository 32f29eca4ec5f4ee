"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from credential_expiration.application.exceptions import NotificationError
from credential_expiration.domain.entities import CredentialSet, Profile
from credential_expiration.domain.services import Alert
from credential_expiration.domain.value_objects import AggregateState, ExpirationThresholds

T = datetime(2020, 12, 1, 12, 50, tzinfo=UTC)


class MovingClock:
    """Clock starting at a fixed instant and advancing with real time."""

    def __init__(self, start: datetime) -> None:
        self._start = start
        self._origin = time.monotonic()

    def __call__(self) -> datetime:
        return self._start + timedelta(seconds=time.monotonic() - self._origin)


class RecordingPresenter:
    """Presenter remembering everything it was asked to show."""

    def __init__(self) -> None:
        self.icons: list[AggregateState] = []
        self.tooltips: list[str] = []

    def set_icon(self, state: AggregateState) -> None:
        self.icons.append(state)

    def set_tooltip(self, text: str) -> None:
        self.tooltips.append(text)


class RecordingAlertSink:
    """Alert sink remembering delivered alerts, optionally failing."""

    def __init__(self, *, configured: bool = True, fail: bool = False) -> None:
        self.alerts: list[Alert] = []
        self.configured = configured
        self.fail = fail

    async def push(self, alert: Alert) -> None:
        if self.fail:
            msg = "notification daemon unavailable"
            raise NotificationError(msg)
        self.alerts.append(alert)

    def is_configured(self) -> bool:
        return self.configured


class StubRepository:
    """Repository returning a replaceable credential set."""

    def __init__(self, credentials: CredentialSet) -> None:
        self.credentials = credentials
        self.error: Exception | None = None
        self.loads = 0

    def load(self) -> CredentialSet:
        self.loads += 1
        if self.error is not None:
            raise self.error
        return self.credentials


class FakeChangeSource:
    """Change source driven by the test."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Exception | bool | None] = asyncio.Queue()
        self.closed = False
        self.subscribed = False

    def trigger(self) -> None:
        self._queue.put_nowait(True)

    def fail(self, error: Exception) -> None:
        self._queue.put_nowait(error)

    async def changes(self):
        self.subscribed = True
        while True:
            item = await self._queue.get()
            if item is None:
                return
            if isinstance(item, Exception):
                raise item
            yield

    def close(self) -> None:
        self.closed = True
        self._queue.put_nowait(None)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant."""
    return T


@pytest.fixture
def default_thresholds() -> ExpirationThresholds:
    """Default expiration thresholds."""
    return ExpirationThresholds(expiring=timedelta(minutes=10), obsolete=timedelta(hours=24))


@pytest.fixture
def expired_profile(now: datetime) -> Profile:
    """A profile that expired a minute ago."""
    return Profile(name="expired", expires_at=now - timedelta(minutes=1))


@pytest.fixture
def expiring_profile(now: datetime) -> Profile:
    """A profile expiring within the expiring window."""
    return Profile(name="expiring", expires_at=now + timedelta(minutes=9))


@pytest.fixture
def current_profile(now: datetime) -> Profile:
    """A profile expiring after the expiring window."""
    return Profile(name="current", expires_at=now + timedelta(minutes=11))


@pytest.fixture
def obsolete_profile(now: datetime) -> Profile:
    """A profile that expired longer ago than the obsolete window."""
    return Profile(name="obsolete", expires_at=now - timedelta(hours=25))


@pytest.fixture
def presenter() -> RecordingPresenter:
    """Presenter recording what is shown."""
    return RecordingPresenter()


@pytest.fixture
def alert_sink() -> RecordingAlertSink:
    """Alert sink recording delivered alerts."""
    return RecordingAlertSink()


@pytest.fixture
def disabled_alert_sink() -> RecordingAlertSink:
    """Alert sink that is not configured."""
    return RecordingAlertSink(configured=False)


@pytest.fixture
def failing_alert_sink() -> RecordingAlertSink:
    """Alert sink that fails every delivery."""
    return RecordingAlertSink(fail=True)


@pytest.fixture
def change_source() -> FakeChangeSource:
    """Change source driven by the test."""
    return FakeChangeSource()


@pytest.fixture
def moving_clock(now: datetime) -> MovingClock:
    """Clock starting at ``now`` and advancing in real time."""
    return MovingClock(now)


@pytest.fixture
def make_repository() -> Callable[..., StubRepository]:
    """Factory for repositories serving the given profiles."""

    def _make(*profiles: Profile) -> StubRepository:
        return StubRepository(CredentialSet({p.name: p for p in profiles}))

    return _make


@pytest.fixture
def write_credentials(tmp_path: Path) -> Callable[[str], Path]:
    """Write a credentials file and return its path."""
    path = tmp_path / "credentials"

    def _write(content: str) -> Path:
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def eventually() -> Callable[[Callable[[], bool]], Awaitable[None]]:
    """Wait until a condition holds, failing after a timeout."""

    async def _wait(condition: Callable[[], bool], timeout: float = 3.0) -> None:
        deadline = time.monotonic() + timeout
        while not condition():
            if time.monotonic() > deadline:
                pytest.fail("Condition not met in time")
            await asyncio.sleep(0.01)

    return _wait
