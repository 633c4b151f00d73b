"""Database infrastructure for the round-up tracker.

This module creates and reuses the SQLAlchemy engine connected to the
round-up database. Configuration is read from the environment (optionally
populated from a ``.env`` file).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from roundup_tracker.application.ports.database import DatabaseEnginePort

DB_URL_ENV = "ROUNDUP_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a pooled SQLAlchemy engine with connection health checks.

    Args:
        db_url: Fully qualified database URL (driver and credentials).

    Returns:
        Engine: Engine with a small QueuePool.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get the lazily created engine for the round-up database."""
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_env_var(DB_URL_ENV))
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by the module engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the round-up database.

        Returns:
            Engine: SQLAlchemy engine connected to the backend.
        """
        return get_engine()


__all__ = [
    "DB_URL_ENV",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
