"""Application Services - metadata resolution and mapping execution."""

from .metadata_resolver import MetadataResolver
from .mapping_service import MappingService, DEFAULT_LOGGER_NAME

__all__ = [
    "MetadataResolver",
    "MappingService",
    "DEFAULT_LOGGER_NAME",
]
