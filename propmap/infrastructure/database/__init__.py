"""Database infrastructure - persistence managers for mapped targets."""

from typing import Optional

from sqlalchemy import MetaData

from propmap.domain.interfaces.persistence import IPersistenceManager

from .sqlalchemy_persistence_manager import SQLAlchemyPersistenceManager
from .inmemory_persistence_manager import InMemoryPersistenceManager


class PersistenceManagerFactory:
    """Create a persistence manager for a storage mode."""

    @staticmethod
    def create(
        mode: str = "inmemory",
        db_url: Optional[str] = None,
        echo: bool = False,
        metadata: Optional[MetaData] = None,
    ) -> IPersistenceManager:
        """
        Create a persistence manager.

        Args:
            mode: "inmemory" or "sqlalchemy"
            db_url: Database URL (sqlalchemy mode)
            echo: Log SQL statements (sqlalchemy mode)
            metadata: Tables to create if missing (sqlalchemy mode)

        Raises:
            ValueError: If the mode is unknown or db_url is missing
        """
        if mode == "inmemory":
            return InMemoryPersistenceManager()
        if mode == "sqlalchemy":
            if not db_url:
                raise ValueError("db_url is required for sqlalchemy persistence mode")
            return SQLAlchemyPersistenceManager(db_url, echo=echo, metadata=metadata)
        raise ValueError(f"Unknown persistence mode: {mode}")


__all__ = [
    "SQLAlchemyPersistenceManager",
    "InMemoryPersistenceManager",
    "PersistenceManagerFactory",
]
