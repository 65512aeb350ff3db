"""
SQLAlchemy Persistence Manager.

Registers mapped target objects with a SQLAlchemy session and commits them.
"""

import logging
from typing import Optional

from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import Session, sessionmaker

from propmap.domain.interfaces.persistence import IPersistenceManager

logger = logging.getLogger(__name__)


class SQLAlchemyPersistenceManager(IPersistenceManager):
    """
    SQLAlchemy-based persistence manager.

    Usage:
        with SQLAlchemyPersistenceManager("sqlite:///propmap.db", metadata=Base.metadata) as pm:
            service = MappingServiceFactory.create_with_dependencies(persistence_manager=pm)
            entity = service.map_to_target(dto, persist=True, flush=True)

    Wrapping an existing session (the caller owns its lifecycle):
        pm = SQLAlchemyPersistenceManager.from_session(session)
    """

    def __init__(
        self,
        db_url: str = "sqlite:///propmap.db",
        echo: bool = False,
        metadata: Optional[MetaData] = None,
        session: Optional[Session] = None,
    ):
        """
        Initialize the persistence manager.

        Args:
            db_url: Database connection URL (ignored when a session is given)
            echo: If True, log SQL statements
            metadata: Optional metadata whose tables are created if missing
            session: Externally managed session to use instead of opening one
        """
        self._session: Optional[Session] = session
        self._owns_session = session is None

        if session is not None:
            self._engine = session.get_bind()
            self._session_factory = None
        else:
            self._engine = create_engine(db_url, echo=echo)
            self._session_factory = sessionmaker(bind=self._engine)

        if metadata is not None:
            metadata.create_all(self._engine)

    @classmethod
    def from_session(cls, session: Session) -> "SQLAlchemyPersistenceManager":
        """Wrap an externally managed session."""
        return cls(session=session)

    def __enter__(self) -> "SQLAlchemyPersistenceManager":
        """Open a session if none is active."""
        if self._session is None:
            self._session = self._session_factory()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the owned session, rolling back on exception."""
        if exc_type:
            self.rollback()
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None
        return False

    def register(self, obj: object) -> None:
        """Add a new object to the session."""
        self._require_session().add(obj)
        logger.debug(f"Registered {type(obj).__name__} for persistence")

    def commit(self) -> None:
        """Commit the session."""
        session = self._require_session()
        try:
            session.commit()
        except Exception:
            self.rollback()
            raise

    def rollback(self) -> None:
        """Rollback the session."""
        if self._session is not None:
            self._session.rollback()

    @property
    def session(self) -> Optional[Session]:
        """Get the current session (for advanced usage)."""
        return self._session

    def _require_session(self) -> Session:
        if self._session is None:
            raise RuntimeError(
                "SQLAlchemyPersistenceManager has no active session; use it as a context manager"
            )
        return self._session
