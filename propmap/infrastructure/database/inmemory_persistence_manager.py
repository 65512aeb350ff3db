"""
In-Memory Persistence Manager.

For unit tests and fast iteration - no database I/O.
Provides the same interface as SQLAlchemyPersistenceManager but keeps
registered objects in lists.
"""

from typing import List

from propmap.domain.interfaces.persistence import IPersistenceManager


class InMemoryPersistenceManager(IPersistenceManager):
    """
    In-memory persistence manager for testing.

    Usage:
        pm = InMemoryPersistenceManager()
        service.map_to_target(dto, persist=True, flush=True)
        assert pm.committed == [entity]
        assert pm.commit_count == 1
    """

    def __init__(self):
        self.pending: List[object] = []
        self.committed: List[object] = []
        self.commit_count = 0
        self.rollback_count = 0

    def register(self, obj: object) -> None:
        self.pending.append(obj)

    def commit(self) -> None:
        self.committed.extend(self.pending)
        self.pending.clear()
        self.commit_count += 1

    def rollback(self) -> None:
        self.pending.clear()
        self.rollback_count += 1

    def reset(self) -> None:
        """Forget all recorded state (for testing)."""
        self.pending.clear()
        self.committed.clear()
        self.commit_count = 0
        self.rollback_count = 0
