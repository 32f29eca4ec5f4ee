"""Port for credential repository - driven/secondary port."""

from typing import Protocol

from ...domain.entities import CredentialSet


class CredentialRepository(Protocol):
    """
    Port for reading credential profiles from the local store.

    This is a driven (secondary) port that defines how the application
    obtains the current set of profiles and their expirations.
    """

    def load(self) -> CredentialSet:
        """
        Load every profile that carries an expiration.

        Returns:
            A complete credential set; never a partial one.

        Raises:
            CredentialReadError: If the store cannot be read.
            CredentialParseError: If the store or a timestamp is malformed.
        """
        ...
