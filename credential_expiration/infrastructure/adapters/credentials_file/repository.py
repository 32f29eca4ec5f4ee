"""Credential repository reading the AWS shared credentials file."""

from __future__ import annotations

import configparser
import logging
import re
from datetime import datetime
from pathlib import Path

from ....application.exceptions import CredentialParseError, CredentialReadError
from ....domain.entities import CredentialSet, Profile

logger = logging.getLogger(__name__)

EXPIRATION_KEY = "aws_expiration"

_RFC3339 = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC3339 timestamp into a timezone-aware datetime.

    Fractional seconds beyond microsecond precision are truncated.

    Raises:
        ValueError: If ``value`` is not a valid RFC3339 timestamp.
    """
    match = _RFC3339.match(value.strip())
    if not match:
        msg = f"Not an RFC3339 timestamp: {value!r}"
        raise ValueError(msg)

    fraction = (match["fraction"] or "0")[:6].ljust(6, "0")
    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    base = match["base"].replace("t", "T").replace(" ", "T")
    return datetime.fromisoformat(f"{base}.{fraction}{offset}")


class IniCredentialRepository:
    """
    Credential repository implementation for INI credential files.

    Implements the CredentialRepository port. Only sections carrying an
    expiration key are returned.
    """

    def __init__(self, path: Path | str, *, expiration_key: str = EXPIRATION_KEY) -> None:
        """
        Initialize the repository.

        Args:
            path: Location of the credentials file.
            expiration_key: Key holding the RFC3339 expiration of a profile.
        """
        self._path = Path(path)
        self._expiration_key = expiration_key

    @property
    def path(self) -> Path:
        """Location of the credentials file."""
        return self._path

    def load(self) -> CredentialSet:
        """
        Load every profile that carries an expiration.

        Returns:
            A complete credential set.

        Raises:
            CredentialReadError: If the file cannot be read.
            CredentialParseError: If the file or a timestamp is malformed.
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read credentials file {self._path}: {e}"
            logger.error(msg)
            raise CredentialReadError(msg) from e

        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read_string(content, source=str(self._path))
        except configparser.Error as e:
            msg = f"Failed to parse credentials file {self._path}: {e}"
            logger.error(msg)
            raise CredentialParseError(msg) from e

        profiles: dict[str, Profile] = {}
        for section in parser.sections():
            raw = parser.get(section, self._expiration_key, fallback=None)
            if raw is None:
                continue
            try:
                expires_at = parse_rfc3339(raw)
            except ValueError as e:
                msg = f"Invalid {self._expiration_key} for profile {section!r}: {e}"
                logger.error(msg)
                raise CredentialParseError(msg) from e
            profiles[section] = Profile(name=section, expires_at=expires_at)

        logger.debug("Loaded %d profiles with expirations from %s", len(profiles), self._path)
        return CredentialSet(profiles)
