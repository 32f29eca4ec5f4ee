"""Expiration thresholds value object."""

from dataclasses import dataclass
from datetime import timedelta

from ..exceptions import InvalidThresholdsError


@dataclass(frozen=True, slots=True)
class ExpirationThresholds:
    """Windows around a profile's expiry that drive its classification."""

    expiring: timedelta = timedelta(minutes=10)
    obsolete: timedelta = timedelta(hours=24)

    def __post_init__(self) -> None:
        """Validate both windows are positive."""
        if self.expiring <= timedelta(0) or self.obsolete <= timedelta(0):
            msg = (
                f"Thresholds must be positive: expiring({self.expiring}), "
                f"obsolete({self.obsolete})"
            )
            raise InvalidThresholdsError(msg)
