"""Infrastructure layer - accessors, transformers and persistence."""

from .accessors import PropertyAccessor
from .transformers import EnumTransformer, TransformerRegistry
from .database import (
    SQLAlchemyPersistenceManager,
    InMemoryPersistenceManager,
    PersistenceManagerFactory,
)

__all__ = [
    "PropertyAccessor",
    "EnumTransformer",
    "TransformerRegistry",
    "SQLAlchemyPersistenceManager",
    "InMemoryPersistenceManager",
    "PersistenceManagerFactory",
]
