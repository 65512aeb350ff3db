"""
propmap - Attribute-driven object-to-object property mapper.

Reads declarative ``MappingAware`` annotations on a class and its properties
and uses them to copy (optionally transforming) values into a target object,
with optional persistence through a SQLAlchemy session.

Architecture follows:
- Domain-Driven Design layering (domain / application / infrastructure)
- Interface-based abstractions for transformers, property access and persistence
- Unit of Work style persistence manager
"""

__version__ = "0.1.0"

# Domain
from propmap.domain.models import (
    MappingAware,
    mapping_aware,
    MappingDirective,
    PropertyDirective,
)
from propmap.domain.exceptions import (
    MappingError,
    NotMappableError,
    TargetInstantiationError,
    UnknownTransformerError,
    DuplicateTransformerError,
    PropertyAccessError,
    TransformerError,
    MissingOptionError,
    InvalidEnumTypeError,
    WrongDataTypeError,
    UnknownEnumValueError,
)
from propmap.domain.interfaces import (
    ITransformer,
    ITransformerRegistry,
    IPropertyAccessor,
    IPersistenceManager,
)

# Infrastructure
from propmap.infrastructure import (
    PropertyAccessor,
    EnumTransformer,
    TransformerRegistry,
    SQLAlchemyPersistenceManager,
    InMemoryPersistenceManager,
)

# Application
from propmap.application import (
    MappingService,
    MetadataResolver,
    MappingServiceFactory,
    ManagedMappingService,
)
from propmap.config import MapperConfig

__all__ = [
    # Version
    "__version__",
    # Domain
    "MappingAware",
    "mapping_aware",
    "MappingDirective",
    "PropertyDirective",
    "MappingError",
    "NotMappableError",
    "TargetInstantiationError",
    "UnknownTransformerError",
    "DuplicateTransformerError",
    "PropertyAccessError",
    "TransformerError",
    "MissingOptionError",
    "InvalidEnumTypeError",
    "WrongDataTypeError",
    "UnknownEnumValueError",
    "ITransformer",
    "ITransformerRegistry",
    "IPropertyAccessor",
    "IPersistenceManager",
    # Infrastructure
    "PropertyAccessor",
    "EnumTransformer",
    "TransformerRegistry",
    "SQLAlchemyPersistenceManager",
    "InMemoryPersistenceManager",
    # Application
    "MappingService",
    "MetadataResolver",
    "MappingServiceFactory",
    "ManagedMappingService",
    # Config
    "MapperConfig",
]
