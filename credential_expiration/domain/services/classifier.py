"""Domain service for classifying profiles by expiration."""

from collections.abc import Mapping
from datetime import datetime, timedelta

from ..entities import Classification, Profile
from ..value_objects import ExpirationThresholds, ProfileStatus


def classify(
    credentials: Mapping[str, Profile],
    now: datetime,
    expiring_window: timedelta,
    obsolete_window: timedelta,
) -> tuple[dict[str, datetime], dict[str, datetime], dict[str, datetime]]:
    """
    Partition profiles into expired, expiring and current buckets.

    Args:
        credentials: Profiles keyed by name.
        now: Evaluation instant.
        expiring_window: Lead time before expiry counted as expiring.
        obsolete_window: Age past expiry after which a profile is ignored.

    Returns:
        Three name to expiry mappings: expired, expiring and current.
        Obsolete profiles appear in none of them.
    """
    thresholds = ExpirationThresholds(expiring=expiring_window, obsolete=obsolete_window)
    buckets: dict[ProfileStatus, dict[str, datetime]] = {status: {} for status in ProfileStatus}

    # Sorted so equal inputs always produce identically ordered buckets
    for name in sorted(credentials):
        profile = credentials[name]
        status = profile.get_status(now, thresholds)
        if not status.is_reported:
            continue
        buckets[status][name] = profile.expires_at

    return (
        buckets[ProfileStatus.EXPIRED],
        buckets[ProfileStatus.EXPIRING],
        buckets[ProfileStatus.CURRENT],
    )


class ExpirationClassifier:
    """Domain service for classifying a credential set."""

    def __init__(self, thresholds: ExpirationThresholds) -> None:
        """Initialize classifier with thresholds."""
        self._thresholds = thresholds

    @property
    def thresholds(self) -> ExpirationThresholds:
        """Thresholds used for classification."""
        return self._thresholds

    def classify(self, credentials: Mapping[str, Profile], now: datetime) -> Classification:
        """Classify ``credentials`` as of ``now``."""
        expired, expiring, current = classify(
            credentials,
            now,
            self._thresholds.expiring,
            self._thresholds.obsolete,
        )
        return Classification(
            evaluated_at=now,
            expired=expired,
            expiring=expiring,
            current=current,
        )
