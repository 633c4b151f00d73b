"""SQLAlchemy-backed repository for round-up contributions."""

from sqlalchemy import text

from roundup_tracker.application.ports.contributions_repository import (
    ContributionsRepositoryPort,
)
from roundup_tracker.application.ports.database import DatabaseEnginePort
from roundup_tracker.domain.models import Contribution
from roundup_tracker.domain.services.contributions import build_contribution
from roundup_tracker.utils.decimal_utils import coerce_decimal


class SqlAlchemyContributionsRepository(ContributionsRepositoryPort):
    """Read-only repository over the ``roundups`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the round-up engine.
        """
        self._db_port = db_port

    def fetch_contributions(self, subject_id: int) -> list[Contribution]:
        """Return the subject's round-ups, oldest first."""
        query = text(
            """
            SELECT roundup_amount AS amount, created_at AS occurred_at
            FROM roundups
            WHERE user_id = :subject_id
            ORDER BY created_at ASC
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"subject_id": subject_id}).all()
        return [
            build_contribution(coerce_decimal(row.amount), row.occurred_at)
            for row in rows
        ]


__all__ = ["SqlAlchemyContributionsRepository"]
