"""Property accessors - path-based reads and writes on arbitrary objects."""

from .property_accessor import PropertyAccessor

__all__ = ["PropertyAccessor"]
