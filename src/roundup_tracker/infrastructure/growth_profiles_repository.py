"""Growth profile repositories (database-backed and static)."""

from sqlalchemy import text

from roundup_tracker.application.ports.database import DatabaseEnginePort
from roundup_tracker.application.ports.growth_profiles import (
    GrowthProfileRepositoryPort,
)
from roundup_tracker.domain.constants import (
    DEFAULT_GROWTH_PROFILES,
    DEFAULT_PROFILE_NAME,
)
from roundup_tracker.domain.models import GrowthProfile
from roundup_tracker.domain.services.validation import validate_rate
from roundup_tracker.utils.decimal_utils import coerce_decimal


class StaticGrowthProfileRepository(GrowthProfileRepositoryPort):
    """Profiles from the built-in table; every subject uses one profile."""

    def __init__(
        self,
        profile_name: str = DEFAULT_PROFILE_NAME,
        profiles: dict | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            profile_name: Profile returned for every subject.
            profiles: Mapping of name to (rate, description).
        """
        self._profile_name = profile_name
        self._profiles = [
            GrowthProfile(
                name=name,
                annual_return_rate=validate_rate(rate),
                description=description,
            )
            for name, (rate, description) in (
                profiles or DEFAULT_GROWTH_PROFILES
            ).items()
        ]

    def fetch_profile_name(self, subject_id: int) -> str:
        return self._profile_name

    def fetch_profile(self, name: str) -> GrowthProfile:
        """Return the named profile.

        Raises:
            RuntimeError: If the profile does not exist.
        """
        for profile in self._profiles:
            if profile.name == name:
                return profile
        raise RuntimeError(f"Unknown growth profile: {name}")

    def fetch_profiles(self) -> list[GrowthProfile]:
        return list(self._profiles)


class SqlAlchemyGrowthProfileRepository(GrowthProfileRepositoryPort):
    """Profiles read from ``investment_profiles`` and ``users``."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        default_profile: str = DEFAULT_PROFILE_NAME,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the round-up engine.
            default_profile: Profile used when the subject has none.
        """
        self._db_port = db_port
        self._default_profile = default_profile

    def fetch_profile_name(self, subject_id: int) -> str:
        """Return the subject's risk profile, or the default one."""
        query = text("SELECT risk_profile FROM users WHERE id = :subject_id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"subject_id": subject_id}).first()
        if row is None or not row.risk_profile:
            return self._default_profile
        return row.risk_profile

    def fetch_profile(self, name: str) -> GrowthProfile:
        """Return the named profile.

        Raises:
            RuntimeError: If the profile does not exist.
        """
        query = text(
            """
            SELECT profile_name, annual_return_rate, description
            FROM investment_profiles
            WHERE profile_name = :name
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"name": name}).first()
        if row is None:
            raise RuntimeError(f"Unknown growth profile: {name}")
        return self._to_profile(row)

    def fetch_profiles(self) -> list[GrowthProfile]:
        """Return every profile ordered by rate."""
        query = text(
            """
            SELECT profile_name, annual_return_rate, description
            FROM investment_profiles
            ORDER BY annual_return_rate ASC
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_profile(row) for row in rows]

    @staticmethod
    def _to_profile(row) -> GrowthProfile:
        return GrowthProfile(
            name=row.profile_name,
            annual_return_rate=validate_rate(
                coerce_decimal(row.annual_return_rate)
            ),
            description=row.description,
        )


__all__ = [
    "StaticGrowthProfileRepository",
    "SqlAlchemyGrowthProfileRepository",
]
