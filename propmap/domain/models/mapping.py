"""
Mapping Domain Models.

Declarative mapping annotation plus the directives resolved from it.

The same ``MappingAware`` value object is used in two places:
- On a class (``@mapping_aware(target=OrderEntity)``): ``target`` is the
  target type, either a class or a dotted import path.
- On a property (``Annotated[int, MappingAware(target="order_id")]`` or
  ``field(metadata={"propmap": MappingAware(...)})``): ``target`` is the
  target property path, defaulting to the property's own name.

Usage:
    @mapping_aware(target=OrderEntity)
    @dataclass
    class OrderDTO:
        reference: Annotated[str, MappingAware()]
        status: Annotated[Status, MappingAware(
            target="state",
            transformer=EnumTransformer,
            options={"enum": Status},
        )]
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

# Attribute set on mapping-aware classes by the ``mapping_aware`` decorator
CLASS_ANNOTATIONS_ATTR = "__mapping_aware__"

# Key used in ``dataclasses.field(metadata=...)``
FIELD_METADATA_KEY = "propmap"

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class MappingAware:
    """
    Mapping annotation.

    Attributes:
        target: Target type (class level) or target property path (property level)
        transformer: Transformer id or transformer class (property level only)
        options: Options handed to the transformer
    """
    target: Optional[Union[str, type]] = None
    transformer: Optional[Union[str, type]] = None
    options: Mapping[str, Any] = field(default_factory=dict)


def mapping_aware(
    target: Optional[Union[str, type]] = None,
) -> Callable[[T], T]:
    """
    Class decorator attaching a class-level ``MappingAware`` annotation.

    May be applied more than once; annotations accumulate on the class
    itself and are inherited by subclasses that declare none of their own.

    Args:
        target: Target class or dotted import path (``"app.entities.Order"``)

    Returns:
        Decorator returning the class unchanged apart from the annotation
    """
    def decorator(cls: T) -> T:
        own = list(cls.__dict__.get(CLASS_ANNOTATIONS_ATTR, ()))
        own.append(MappingAware(target=target))
        setattr(cls, CLASS_ANNOTATIONS_ATTR, tuple(own))
        return cls
    return decorator


@dataclass(frozen=True)
class PropertyDirective:
    """
    Resolved mapping instruction for one source property.

    Attributes:
        target_path: Property path on the target object
        transformer_id: Registry id of the transformer, None for a verbatim copy
        options: Transformer options
    """
    target_path: str
    transformer_id: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_transformer(self) -> bool:
        return self.transformer_id is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "target_path": self.target_path,
            "transformer_id": self.transformer_id,
            "options": dict(self.options),
        }


@dataclass(frozen=True)
class MappingDirective:
    """
    Resolved mapping for a source type.

    Attributes:
        target_type: Class instantiated when no target object is supplied
        properties: Source property name -> PropertyDirective, in declaration order
    """
    target_type: Type[Any]
    properties: Dict[str, PropertyDirective] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary (used for trace records)."""
        return {
            "target_type": f"{self.target_type.__module__}.{self.target_type.__qualname__}",
            "properties": {
                name: directive.to_dict()
                for name, directive in self.properties.items()
            },
        }


__all__ = [
    "CLASS_ANNOTATIONS_ATTR",
    "FIELD_METADATA_KEY",
    "MappingAware",
    "mapping_aware",
    "PropertyDirective",
    "MappingDirective",
]
