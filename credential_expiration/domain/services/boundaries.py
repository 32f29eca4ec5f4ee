"""Domain service computing the instants at which classification changes."""

from collections.abc import Mapping
from datetime import datetime

from ..entities import Profile
from ..value_objects import ExpirationThresholds


def next_boundaries(
    credentials: Mapping[str, Profile],
    now: datetime,
    thresholds: ExpirationThresholds,
) -> list[datetime]:
    """
    Compute future instants at which any profile changes classification.

    For each profile that is still reported this is the moment it starts
    expiring, the moment it expires and the moment it becomes obsolete.
    Only instants strictly after ``now`` are kept, and identical instants are
    merged.

    Returns:
        Sorted list of distinct future instants.
    """
    instants: set[datetime] = set()
    for profile in credentials.values():
        if not profile.get_status(now, thresholds).is_reported:
            continue
        candidates = (
            profile.expiring_at(thresholds),
            profile.expires_at,
            profile.obsolete_after(thresholds),
        )
        instants.update(instant for instant in candidates if instant > now)

    return sorted(instants)
