"""Tests for ExpirationThresholds value object."""

from __future__ import annotations

from datetime import timedelta

import pytest

from credential_expiration.domain.exceptions import InvalidThresholdsError
from credential_expiration.domain.value_objects import ExpirationThresholds


class TestExpirationThresholds:
    """Tests for ExpirationThresholds value object."""

    def test_default_thresholds(self) -> None:
        """Default thresholds should be 10 minutes and 24 hours."""
        thresholds = ExpirationThresholds()
        assert thresholds.expiring == timedelta(minutes=10)
        assert thresholds.obsolete == timedelta(hours=24)

    def test_custom_thresholds(self) -> None:
        """Custom thresholds should be accepted if positive."""
        thresholds = ExpirationThresholds(expiring=timedelta(minutes=30), obsolete=timedelta(hours=8))
        assert thresholds.expiring == timedelta(minutes=30)
        assert thresholds.obsolete == timedelta(hours=8)

    def test_zero_expiring_invalid(self) -> None:
        """Expiring window cannot be zero."""
        with pytest.raises(InvalidThresholdsError, match="Thresholds must be positive"):
            ExpirationThresholds(expiring=timedelta(0))

    def test_negative_obsolete_invalid(self) -> None:
        """Negative obsolete windows are invalid."""
        with pytest.raises(ValueError, match="Thresholds must be positive"):
            ExpirationThresholds(obsolete=timedelta(hours=-1))

    def test_thresholds_are_frozen(self) -> None:
        """Thresholds should be immutable."""
        thresholds = ExpirationThresholds()
        with pytest.raises(AttributeError):
            thresholds.expiring = timedelta(minutes=5)  # type: ignore[misc]
