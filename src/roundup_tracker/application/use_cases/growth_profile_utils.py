"""Helpers shared by use cases that resolve a subject's growth profile."""

from roundup_tracker.application.ports.growth_profiles import (
    GrowthProfileRepositoryPort,
)
from roundup_tracker.domain.models import GrowthProfile


def resolve_subject_profile(
    profile_repository: GrowthProfileRepositoryPort,
    subject_id: int,
    logger,
) -> GrowthProfile:
    """Return the growth profile selected by a subject.

    Args:
        profile_repository: Port resolving profile names and rates.
        subject_id: Identifier of the subject.
        logger: Logger used for the resolution message.

    Returns:
        GrowthProfile: Profile with its annual return rate.
    """
    profile_name = profile_repository.fetch_profile_name(subject_id)
    profile = profile_repository.fetch_profile(profile_name)
    logger.info(
        f"Subject {subject_id} uses profile {profile.name} "
        f"({profile.annual_return_rate})"
    )
    return profile


__all__ = ["resolve_subject_profile"]
