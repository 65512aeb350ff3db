"""Domain Models - Mapping annotation and resolved directives."""

from .mapping import (
    CLASS_ANNOTATIONS_ATTR,
    FIELD_METADATA_KEY,
    MappingAware,
    mapping_aware,
    PropertyDirective,
    MappingDirective,
)

__all__ = [
    "CLASS_ANNOTATIONS_ATTR",
    "FIELD_METADATA_KEY",
    "MappingAware",
    "mapping_aware",
    "PropertyDirective",
    "MappingDirective",
]
