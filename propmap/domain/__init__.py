"""Domain layer - mapping models, exceptions and collaborator interfaces."""

from .models import MappingAware, mapping_aware, MappingDirective, PropertyDirective
from .exceptions import MappingError, NotMappableError
from .interfaces import (
    ITransformer,
    ITransformerRegistry,
    IPropertyAccessor,
    IPersistenceManager,
)

__all__ = [
    "MappingAware",
    "mapping_aware",
    "MappingDirective",
    "PropertyDirective",
    "MappingError",
    "NotMappableError",
    "ITransformer",
    "ITransformerRegistry",
    "IPropertyAccessor",
    "IPersistenceManager",
]
