"""
Metadata Resolver.

Reads ``MappingAware`` annotations from a class and its properties and
turns them into a ``MappingDirective``.

Property annotations are discovered from:
- ``typing.Annotated`` hints:  ``name: Annotated[str, MappingAware()]``
- dataclass field metadata:    ``name: str = field(metadata={"propmap": MappingAware()})``

Directives are resolved on every call; nothing is cached.
"""

import dataclasses
import logging
import typing
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple, Type, Union

from propmap.domain.exceptions import NotMappableError
from propmap.domain.interfaces.transformer import ITransformer
from propmap.domain.models.mapping import (
    CLASS_ANNOTATIONS_ATTR,
    FIELD_METADATA_KEY,
    MappingAware,
    MappingDirective,
    PropertyDirective,
)
from propmap.utils import import_object

logger = logging.getLogger(__name__)


class MetadataResolver:
    """
    Resolve mapping directives from class metadata.

    Class-level rules:
    - No class-level annotation -> NotMappableError
    - No annotation declaring a target -> NotMappableError
    - Several annotations naming different targets -> NotMappableError
    - Several annotations naming the same target are accepted
    """

    def __init__(self, trace_logger: Optional[logging.Logger] = None):
        self._logger = trace_logger or logger

    def resolve(self, source_type: Type[Any]) -> MappingDirective:
        """
        Resolve the mapping directive for a class.

        Args:
            source_type: Class carrying MappingAware annotations

        Returns:
            MappingDirective with target type and per-property directives

        Raises:
            NotMappableError: If the class is not mapping-aware or declares no usable target
        """
        class_annotations: Sequence[MappingAware] = getattr(source_type, CLASS_ANNOTATIONS_ATTR, ())
        if not class_annotations:
            raise NotMappableError(
                f"Can not automap object, because {source_type.__qualname__} "
                f"is not using annotation: {MappingAware.__name__}",
                source_type,
            )

        target_type = self._resolve_target_type(source_type, class_annotations)

        properties: Dict[str, PropertyDirective] = {}
        for name, annotation in self._iter_property_annotations(source_type):
            properties[name] = self._to_property_directive(source_type, name, annotation)

        directive = MappingDirective(target_type=target_type, properties=properties)
        self._logger.debug(
            f"Properties to map for {source_type.__qualname__}: {list(properties)}",
            extra={"propmap": directive.to_dict()},
        )
        return directive

    # ═══════════════════════════════════════════════════════════════════════════
    # Class level
    # ═══════════════════════════════════════════════════════════════════════════

    def _resolve_target_type(
        self,
        source_type: type,
        class_annotations: Sequence[MappingAware],
    ) -> type:
        declared = [a.target for a in class_annotations if a.target is not None]
        if not declared:
            raise NotMappableError(
                f"Can not automap object, because target class is not specified "
                f"on class annotation of {source_type.__qualname__}",
                source_type,
            )

        resolved = []
        for target in declared:
            target_type = self._resolve_class(source_type, target)
            if target_type not in resolved:
                resolved.append(target_type)

        if len(resolved) > 1:
            names = ", ".join(t.__qualname__ for t in resolved)
            raise NotMappableError(
                f"Conflicting target classes declared on {source_type.__qualname__}: {names}",
                source_type,
            )
        return resolved[0]

    @staticmethod
    def _resolve_class(source_type: type, target: Union[str, type]) -> type:
        resolved = import_object(target) if isinstance(target, str) else target
        if not isinstance(resolved, type):
            raise NotMappableError(
                f"Target {target!r} declared on {source_type.__qualname__} is not a class",
                source_type,
            )
        return resolved

    # ═══════════════════════════════════════════════════════════════════════════
    # Property level
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _iter_property_annotations(source_type: type) -> Iterator[Tuple[str, MappingAware]]:
        """Yield (property name, annotation) in declaration order, base classes first."""
        try:
            hints = typing.get_type_hints(source_type, include_extras=True)
        except (NameError, TypeError) as e:
            raise NotMappableError(
                f"Can not read annotations of {source_type.__qualname__}: {e}",
                source_type,
            ) from e

        field_annotations: Dict[str, MappingAware] = {}
        if dataclasses.is_dataclass(source_type):
            for f in dataclasses.fields(source_type):
                meta = f.metadata.get(FIELD_METADATA_KEY)
                if isinstance(meta, MappingAware):
                    field_annotations[f.name] = meta

        for name, hint in hints.items():
            annotation = field_annotations.pop(name, None)
            if typing.get_origin(hint) is typing.Annotated:
                for meta in hint.__metadata__:
                    if isinstance(meta, MappingAware):
                        annotation = meta
            if annotation is not None:
                yield name, annotation

        yield from field_annotations.items()

    def _to_property_directive(
        self,
        source_type: type,
        name: str,
        annotation: MappingAware,
    ) -> PropertyDirective:
        target_path = annotation.target if annotation.target is not None else name
        if not isinstance(target_path, str):
            raise NotMappableError(
                f"Target of property {source_type.__qualname__}.{name} must be a property path",
                source_type,
            )

        return PropertyDirective(
            target_path=target_path,
            transformer_id=self._transformer_id(source_type, name, annotation.transformer),
            options=dict(annotation.options or {}),
        )

    @staticmethod
    def _transformer_id(source_type: type, name: str, transformer: Any) -> Optional[str]:
        if transformer is None:
            return None
        if isinstance(transformer, str):
            return transformer
        if isinstance(transformer, ITransformer) or (
            isinstance(transformer, type) and issubclass(transformer, ITransformer)
        ):
            return transformer.supports()
        raise NotMappableError(
            f"Transformer of property {source_type.__qualname__}.{name} must be an id "
            f"or an ITransformer, got {transformer!r}",
            source_type,
        )


__all__ = ["MetadataResolver"]
