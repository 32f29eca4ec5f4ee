"""Classification aggregate - the outcome of evaluating a credential set."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..value_objects import AggregateState


@dataclass(frozen=True, slots=True)
class Classification:
    """Profiles partitioned into expired, expiring and current buckets.

    Each bucket maps a profile name to its expiry. Obsolete profiles are
    absent from all three.
    """

    evaluated_at: datetime
    expired: dict[str, datetime] = field(default_factory=dict)
    expiring: dict[str, datetime] = field(default_factory=dict)
    current: dict[str, datetime] = field(default_factory=dict)

    @property
    def has_expired(self) -> bool:
        """Check if any profile has expired."""
        return bool(self.expired)

    @property
    def has_expiring(self) -> bool:
        """Check if any profile is about to expire."""
        return bool(self.expiring)

    @property
    def has_current(self) -> bool:
        """Check if any profile is still current."""
        return bool(self.current)

    @property
    def aggregate_state(self) -> AggregateState:
        """Worst-case state over all reported profiles."""
        if self.has_expired:
            return AggregateState.EXPIRED
        if self.has_expiring:
            return AggregateState.EXPIRING
        return AggregateState.CURRENT

    @property
    def reported_count(self) -> int:
        """Number of profiles present in any bucket."""
        return len(self.expired) + len(self.expiring) + len(self.current)

    def remaining(self, expires_at: datetime) -> timedelta:
        """Time left until ``expires_at``, truncated to whole seconds."""
        delta = expires_at - self.evaluated_at
        return timedelta(seconds=int(delta.total_seconds()))

    def get_summary(self) -> str:
        """Generate a human-readable summary of the classification."""
        parts: list[str] = []
        if self.has_expired:
            parts.append(f"{len(self.expired)} expired")
        if self.has_expiring:
            parts.append(f"{len(self.expiring)} expiring")
        if self.has_current:
            parts.append(f"{len(self.current)} current")

        if not parts:
            return "No profiles to report"
        return ", ".join(parts)
