"""Tests for the SQLAlchemy contributions repository."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from roundup_tracker.infrastructure.contributions_repository import (
    SqlAlchemyContributionsRepository,
)


def _db_port(rows) -> tuple[MagicMock, MagicMock]:
    conn = MagicMock()
    conn.execute.return_value.all.return_value = rows
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return db_port, conn


def test_fetch_contributions_maps_rows() -> None:
    """Rows become validated contributions with UTC instants."""
    db_port, conn = _db_port(
        [
            SimpleNamespace(
                amount=Decimal("0.65"),
                occurred_at=datetime(2024, 1, 1, 12, 0),
            ),
            SimpleNamespace(
                amount=0.99,
                occurred_at=datetime(2024, 1, 2, 8, 30),
            ),
        ]
    )
    repository = SqlAlchemyContributionsRepository(db_port)

    contributions = repository.fetch_contributions(7)

    assert [item.amount for item in contributions] == [
        Decimal("0.65"),
        Decimal("0.99"),
    ]
    assert contributions[0].occurred_at == datetime(
        2024, 1, 1, 12, 0, tzinfo=timezone.utc
    )
    query, params = conn.execute.call_args.args
    assert params == {"subject_id": 7}
    assert "FROM roundups" in str(query)


def test_fetch_contributions_empty() -> None:
    """No rows give an empty list."""
    db_port, _ = _db_port([])

    assert SqlAlchemyContributionsRepository(db_port).fetch_contributions(1) == []
