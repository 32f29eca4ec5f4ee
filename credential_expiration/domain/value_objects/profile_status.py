"""Profile status value object."""

from enum import StrEnum, auto


class ProfileStatus(StrEnum):
    """Status of a single profile at an evaluation instant."""

    EXPIRED = auto()
    EXPIRING = auto()
    CURRENT = auto()
    OBSOLETE = auto()

    @property
    def is_reported(self) -> bool:
        """Check if profiles with this status are shown to the user."""
        return self is not ProfileStatus.OBSOLETE

    def __str__(self) -> str:
        return self.value
