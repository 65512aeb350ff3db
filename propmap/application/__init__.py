"""Application layer - mapping services and factories."""

from .services import MappingService, MetadataResolver
from .factories import MappingServiceFactory, ManagedMappingService

__all__ = [
    "MappingService",
    "MetadataResolver",
    "MappingServiceFactory",
    "ManagedMappingService",
]
