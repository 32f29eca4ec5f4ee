"""Tests for AggregateState and ProfileStatus value objects."""

from __future__ import annotations

from credential_expiration.domain.value_objects import AggregateState, ProfileStatus


class TestAggregateState:
    """Tests for AggregateState enum."""

    def test_states_are_ordered_by_severity(self) -> None:
        """CURRENT < EXPIRING < EXPIRED."""
        assert AggregateState.CURRENT < AggregateState.EXPIRING < AggregateState.EXPIRED

    def test_max_picks_worst_state(self) -> None:
        """max() should yield the most severe state."""
        states = [AggregateState.EXPIRING, AggregateState.CURRENT, AggregateState.EXPIRED]
        assert max(states) is AggregateState.EXPIRED

    def test_string_representation(self) -> None:
        """States should render lowercase."""
        assert str(AggregateState.CURRENT) == "current"
        assert str(AggregateState.EXPIRING) == "expiring"
        assert str(AggregateState.EXPIRED) == "expired"

    def test_labels(self) -> None:
        """Labels should be capitalized names."""
        assert AggregateState.EXPIRING.label == "Expiring"

    def test_colors(self) -> None:
        """Each state should map to red, amber or green."""
        assert AggregateState.EXPIRED.color_hex == "#dc3545"
        assert AggregateState.EXPIRING.color_hex == "#ffc107"
        assert AggregateState.CURRENT.color_hex == "#28a745"


class TestProfileStatus:
    """Tests for ProfileStatus enum."""

    def test_obsolete_is_not_reported(self) -> None:
        """OBSOLETE profiles should be hidden."""
        assert ProfileStatus.OBSOLETE.is_reported is False

    def test_other_statuses_are_reported(self) -> None:
        """Every other status should be shown."""
        assert ProfileStatus.EXPIRED.is_reported is True
        assert ProfileStatus.EXPIRING.is_reported is True
        assert ProfileStatus.CURRENT.is_reported is True

    def test_status_values(self) -> None:
        """Status enum values should be lowercase strings."""
        assert str(ProfileStatus.EXPIRED) == "expired"
        assert ProfileStatus.OBSOLETE.value == "obsolete"
