"""Port for reading round-up contributions."""

from typing import Protocol

from roundup_tracker.domain.models import Contribution


class ContributionsRepositoryPort(Protocol):
    """Port exposing the contributions recorded for a subject."""

    def fetch_contributions(self, subject_id: int) -> list[Contribution]:
        """Return every contribution of the subject, oldest first."""


__all__ = ["ContributionsRepositoryPort"]
