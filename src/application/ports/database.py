"""Database ports for the finance tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide the concrete
adapter, and the process entry point owns its lifecycle.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the ledger database.

    Application code depends on this protocol instead of concrete drivers
    or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the configured backend.
        """

    def dispose(self) -> None:
        """Release every pooled connection held by the engine."""


__all__ = ["DatabaseEnginePort"]
