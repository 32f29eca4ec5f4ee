"""Domain entities - Objects with identity and lifecycle."""

from .classification import Classification
from .credential_set import CredentialSet
from .profile import Profile

__all__ = [
    "Classification",
    "CredentialSet",
    "Profile",
]
