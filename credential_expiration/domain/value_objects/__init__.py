"""Domain value objects - Immutable objects defined by their attributes."""

from .aggregate_state import AggregateState
from .profile_status import ProfileStatus
from .thresholds import ExpirationThresholds

__all__ = [
    "AggregateState",
    "ExpirationThresholds",
    "ProfileStatus",
]
