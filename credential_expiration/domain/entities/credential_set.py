"""Credential set entity - the profiles read from one load of the store."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .profile import Profile


class CredentialSet(Mapping[str, Profile]):
    """Read-only mapping from profile name to profile.

    A new set is built on every load; it is never mutated afterwards.
    """

    __slots__ = ("_profiles",)

    def __init__(self, profiles: Mapping[str, Profile] | None = None) -> None:
        self._profiles: dict[str, Profile] = dict(profiles or {})

    def __getitem__(self, name: str) -> Profile:
        return self._profiles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f"CredentialSet({sorted(self._profiles)!r})"
