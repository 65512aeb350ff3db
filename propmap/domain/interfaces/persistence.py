"""
Persistence Manager Interface.

Object lifecycle registration and durable commit for mapped targets.
"""

from abc import ABC, abstractmethod


class IPersistenceManager(ABC):
    """
    Persistence manager interface.

    Tracks newly created target objects and commits pending changes.

    Usage:
        with manager:
            target = service.map_to_target(dto, persist=True, flush=True)

    Design Decisions:
    - Context manager handles session lifecycle
    - Automatic rollback on exception
    - Explicit commit required
    """

    def __enter__(self) -> "IPersistenceManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.rollback()
        return False

    @abstractmethod
    def register(self, obj: object) -> None:
        """
        Register a new object for persistence.

        Args:
            obj: Object to be inserted on the next commit
        """
        pass

    @abstractmethod
    def commit(self) -> None:
        """
        Commit pending changes.

        Raises:
            Exception: If commit fails (implementation-specific)
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard pending changes."""
        pass
