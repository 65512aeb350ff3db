"""Domain Interfaces - Abstract contracts (Ports) for the domain layer."""

from .transformer import ITransformer, ITransformerRegistry
from .property_accessor import IPropertyAccessor
from .persistence import IPersistenceManager

__all__ = [
    # Transformers
    "ITransformer",
    "ITransformerRegistry",
    # Property access
    "IPropertyAccessor",
    # Persistence
    "IPersistenceManager",
]
