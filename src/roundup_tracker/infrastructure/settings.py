"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from roundup_tracker.domain.constants import DEFAULT_PROFILE_NAME
from roundup_tracker.infrastructure.logging.logger import get_app_logger

PROFILE_BACKENDS = ("static", "sqlalchemy")
TRUTHY_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for wiring the round-up tracker.

    Attributes:
        profile_backend: Growth profile source (static or sqlalchemy).
        default_profile: Profile used when a subject has none.
        strict_periods: Reject unknown period tokens instead of falling
            back to 30 days.
        subject_id: Default subject for the CLI and dashboard.
    """

    profile_backend: str = "static"
    default_profile: str = DEFAULT_PROFILE_NAME
    strict_periods: bool = False
    subject_id: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = (
            os.getenv("ROUNDUP_PROFILE_BACKEND", "static").strip().lower()
        )
        if backend not in PROFILE_BACKENDS:
            logger.warning(
                f"Unknown profile backend {backend!r}, using static profiles"
            )
            backend = "static"
        default_profile = (
            os.getenv("ROUNDUP_DEFAULT_PROFILE", DEFAULT_PROFILE_NAME)
            .strip()
            .lower()
            or DEFAULT_PROFILE_NAME
        )
        strict_periods = (
            os.getenv("ROUNDUP_STRICT_PERIODS", "").strip().lower()
            in TRUTHY_VALUES
        )
        return cls(
            profile_backend=backend,
            default_profile=default_profile,
            strict_periods=strict_periods,
            subject_id=cls._parse_subject_id(
                os.getenv("ROUNDUP_SUBJECT_ID"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_subject_id(raw_value: str | None, logger) -> int | None:
        """Parse the default subject identifier.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int | None: Parsed identifier, or None when unset or invalid.
        """
        if not raw_value or not raw_value.strip():
            return None
        try:
            return int(raw_value.strip())
        except ValueError:
            logger.warning(f"Ignoring non-integer ROUNDUP_SUBJECT_ID: {raw_value}")
            return None


__all__ = ["TrackerSettings"]
