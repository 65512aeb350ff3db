"""Transformers - built-in value converters and the registry they live in."""

from .enum_transformer import EnumTransformer
from .registry import (
    DEFAULT_ENTRY_POINT_GROUP,
    BUILTIN_TRANSFORMERS,
    TransformerRegistry,
)

__all__ = [
    "EnumTransformer",
    "DEFAULT_ENTRY_POINT_GROUP",
    "BUILTIN_TRANSFORMERS",
    "TransformerRegistry",
]
