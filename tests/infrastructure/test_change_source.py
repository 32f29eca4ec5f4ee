"""Tests for the watchfiles-backed change source."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from credential_expiration.application.exceptions import SubscriptionError
from credential_expiration.infrastructure.adapters.filesystem import WatchfilesChangeSource


async def _next_change(source: WatchfilesChangeSource) -> None:
    async for _ in source.changes():
        return


class TestWatchfilesChangeSource:
    """Tests for WatchfilesChangeSource."""

    def test_path_is_resolved(self, tmp_path: Path) -> None:
        """The watched path is absolute."""
        source = WatchfilesChangeSource(tmp_path / "credentials")
        assert source.path == (tmp_path / "credentials").resolve()

    @pytest.mark.asyncio
    async def test_reports_write_to_file(self, tmp_path: Path) -> None:
        """Writing the watched file yields a change."""
        path = tmp_path / "credentials"
        path.write_text("[a]\n", encoding="utf-8")
        source = WatchfilesChangeSource(path, debounce_ms=200)

        task = asyncio.create_task(_next_change(source))
        await asyncio.sleep(0.5)
        path.write_text("[b]\n", encoding="utf-8")

        await asyncio.wait_for(task, timeout=5)
        source.close()

    @pytest.mark.asyncio
    async def test_close_ends_iteration(self, tmp_path: Path) -> None:
        """Closing the source stops the iterator."""
        path = tmp_path / "credentials"
        path.write_text("[a]\n", encoding="utf-8")
        source = WatchfilesChangeSource(path)
        changes: list[None] = []

        async def _consume() -> None:
            async for change in source.changes():
                changes.append(change)

        task = asyncio.create_task(_consume())
        await asyncio.sleep(0.2)
        source.close()

        await asyncio.wait_for(task, timeout=5)
        assert changes == []

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path: Path) -> None:
        """A file in a missing directory cannot be watched."""
        source = WatchfilesChangeSource(tmp_path / "missing" / "credentials")

        with pytest.raises(SubscriptionError):
            await asyncio.wait_for(_next_change(source), timeout=5)
