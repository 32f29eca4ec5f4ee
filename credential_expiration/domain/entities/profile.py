"""Profile entity representing a named set of temporary credentials."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import ExpirationThresholds, ProfileStatus


@dataclass(frozen=True, slots=True)
class Profile:
    """A named credential profile with an expiration timestamp."""

    name: str
    expires_at: datetime

    def expiring_at(self, thresholds: ExpirationThresholds) -> datetime:
        """Instant from which the profile counts as expiring."""
        return self.expires_at - thresholds.expiring

    def obsolete_after(self, thresholds: ExpirationThresholds) -> datetime:
        """Instant after which the profile is no longer reported."""
        return self.expires_at + thresholds.obsolete

    def get_status(self, now: datetime, thresholds: ExpirationThresholds) -> ProfileStatus:
        """Determine the status of this profile at ``now``.

        The obsolete check runs first so that long-dead profiles never count
        as expired.
        """
        if now - self.expires_at > thresholds.obsolete:
            return ProfileStatus.OBSOLETE
        if self.expires_at <= now:
            return ProfileStatus.EXPIRED
        if self.expires_at - now <= thresholds.expiring:
            return ProfileStatus.EXPIRING
        return ProfileStatus.CURRENT
