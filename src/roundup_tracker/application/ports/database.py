"""Database port for the round-up tracker.

Infrastructure implementations provide the concrete engine; use cases and
repositories depend on this protocol only.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the SQLAlchemy engine of the round-up database."""

    def get_engine(self) -> Engine:
        """Get the engine for the round-up database.

        Returns:
            Engine: SQLAlchemy engine connected to the backend.
        """


__all__ = ["DatabaseEnginePort"]
