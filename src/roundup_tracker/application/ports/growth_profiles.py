"""Port for resolving growth profiles (risk tier to annual rate)."""

from typing import Protocol

from roundup_tracker.domain.models import GrowthProfile


class GrowthProfileRepositoryPort(Protocol):
    """Port exposing growth profiles and the profile chosen by a subject."""

    def fetch_profile_name(self, subject_id: int) -> str:
        """Return the profile name selected by the subject."""

    def fetch_profile(self, name: str) -> GrowthProfile:
        """Return the growth profile with the given name."""

    def fetch_profiles(self) -> list[GrowthProfile]:
        """Return every available growth profile."""


__all__ = ["GrowthProfileRepositoryPort"]
