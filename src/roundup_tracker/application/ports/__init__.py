"""Application ports package."""

from .contributions_repository import ContributionsRepositoryPort
from .database import DatabaseEnginePort
from .growth_profiles import GrowthProfileRepositoryPort

__all__ = [
    "ContributionsRepositoryPort",
    "DatabaseEnginePort",
    "GrowthProfileRepositoryPort",
]
