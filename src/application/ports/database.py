"""Database ports for the billing service.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the billing database engine.

    Application use cases and repositories depend on this protocol instead of
    concrete database drivers or configuration details.
    """

    def get_billing_engine(self) -> Engine:
        """Get the engine for the billing database.

        Returns:
            Engine: SQLAlchemy engine connected to the billing store.
        """


__all__ = ["DatabaseEnginePort"]
