"""
Mapping Service Implementation.

Copies (optionally transformed) property values between a mapping-aware
object and its counterpart:
- map_to_target: mapping-aware source -> target (new or existing)
- map_from_target: external object -> mapping-aware object

Unreadable or unwritable properties are skipped with a trace record;
resolution and transformer errors propagate to the caller.
"""

import logging
from typing import Any, Dict, Optional

from propmap.domain.exceptions import MappingError, TargetInstantiationError
from propmap.domain.interfaces.persistence import IPersistenceManager
from propmap.domain.interfaces.property_accessor import IPropertyAccessor
from propmap.domain.interfaces.transformer import ITransformer, ITransformerRegistry
from propmap.domain.models.mapping import MappingDirective
from propmap.infrastructure.accessors import PropertyAccessor

from .metadata_resolver import MetadataResolver

DEFAULT_LOGGER_NAME = "propmap.mapping"


class MappingService:
    """
    Attribute-driven object-to-object mapper.

    Usage:
        service = MappingService(
            transformer_registry=TransformerRegistry.with_builtins(),
            persistence_manager=persistence_manager,
        )
        entity = service.map_to_target(dto, persist=True, flush=True)
        dto = service.map_from_target(entity, OrderDTO())

    Trace records (INFO per copied property, WARNING per unwritable target)
    carry a structured payload in ``record.propmap``.
    """

    def __init__(
        self,
        transformer_registry: ITransformerRegistry,
        persistence_manager: Optional[IPersistenceManager] = None,
        property_accessor: Optional[IPropertyAccessor] = None,
        metadata_resolver: Optional[MetadataResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the mapping service.

        Args:
            transformer_registry: Registry transformer ids are looked up in
            persistence_manager: Required only for persist/flush
            property_accessor: Path accessor (default: PropertyAccessor)
            metadata_resolver: Directive resolver (default: MetadataResolver)
            logger: Trace sink (default: ``propmap.mapping``)
        """
        self._transformers = transformer_registry
        self._persistence_manager = persistence_manager
        self._accessor = property_accessor or PropertyAccessor()
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self._resolver = metadata_resolver or MetadataResolver(self._logger)

    @property
    def persistence_manager(self) -> Optional[IPersistenceManager]:
        return self._persistence_manager

    def get_properties_to_map(self, mapped_object: object) -> MappingDirective:
        """
        Resolve the mapping directive of an object's class.

        Raises:
            NotMappableError: If the class is not mapping-aware
        """
        return self._resolver.resolve(type(mapped_object))

    def map_to_target(
        self,
        source: object,
        target: Optional[object] = None,
        persist: bool = False,
        flush: bool = False,
    ) -> object:
        """
        Map a mapping-aware source onto a target.

        Args:
            source: Mapping-aware object to read from
            target: Object to write to; a new target instance is created if None
            persist: Register a newly created target with the persistence manager
            flush: Commit the persistence manager if any property was written

        Returns:
            The target object

        Raises:
            NotMappableError: If the source class is not mapping-aware
            TargetInstantiationError: If a new target cannot be created
            UnknownTransformerError: If a declared transformer is not registered
            TransformerError: If a transformer rejects a value
            MappingError: If a new target must be persisted, or a flush is due,
                without a persistence manager
        """
        mapping = self._resolver.resolve(type(source))

        if target is None:
            target = self._instantiate(mapping.target_type)
            if persist:
                self._require_persistence("persist")
                self._persistence_manager.register(target)

        modification_count = 0
        for source_property, directive in mapping.properties.items():
            target_path = directive.target_path

            if not self._accessor.is_writable(target, target_path):
                self._trace_skipped(target, target_path, source_property)
                continue
            if not self._accessor.is_readable(source, source_property):
                self._trace_unreadable(source, source_property)
                continue

            value = self._accessor.get_value(source, source_property)
            transformer: Optional[ITransformer] = None
            if directive.has_transformer:
                transformer = self._transformers.lookup(directive.transformer_id)
                value = transformer.transform(
                    value, directive.options, target_object=target, mapped_object=source
                )

            self._accessor.set_value(target, target_path, value)
            modification_count += 1
            self._trace_mapped(target, target_path, source_property, value, transformer)

        self._logger.debug(
            f"Mapped {modification_count} of {len(mapping.properties)} properties "
            f"from {type(source).__name__} to {type(target).__name__}"
        )

        if modification_count > 0 and flush:
            self._require_persistence("flush")
            self._persistence_manager.commit()

        return target

    def map_from_target(self, source: object, mapping_aware_target: object) -> object:
        """
        Map an external object back onto a mapping-aware object.

        Directives are resolved from ``mapping_aware_target``; for each one the
        value is read from ``source`` at the target path and written to the
        mapping-aware property, through the transformer's reverse conversion
        when one is declared. Nothing is persisted.

        Args:
            source: Object to read from (typically an entity)
            mapping_aware_target: Mapping-aware object to write to

        Returns:
            mapping_aware_target
        """
        mapping = self._resolver.resolve(type(mapping_aware_target))

        for source_property, directive in mapping.properties.items():
            target_path = directive.target_path

            if not self._accessor.is_writable(mapping_aware_target, source_property):
                self._trace_skipped(mapping_aware_target, source_property, target_path)
                continue
            if not self._accessor.is_readable(source, target_path):
                self._trace_unreadable(source, target_path)
                continue

            value = self._accessor.get_value(source, target_path)
            transformer: Optional[ITransformer] = None
            if directive.has_transformer:
                transformer = self._transformers.lookup(directive.transformer_id)
                value = transformer.reverse_transform(
                    value,
                    directive.options,
                    target_object=source,
                    mapped_object=mapping_aware_target,
                )

            self._accessor.set_value(mapping_aware_target, source_property, value)
            self._trace_mapped(mapping_aware_target, source_property, target_path, value, transformer)

        return mapping_aware_target

    # ═══════════════════════════════════════════════════════════════════════════
    # Helpers
    # ═══════════════════════════════════════════════════════════════════════════

    def _require_persistence(self, operation: str) -> None:
        if self._persistence_manager is None:
            raise MappingError(f"{operation} requested but no persistence manager is configured")

    @staticmethod
    def _instantiate(target_type: type) -> object:
        try:
            return target_type()
        except TypeError as e:
            raise TargetInstantiationError(
                f"Can not instantiate target class {target_type.__qualname__}: {e}",
                target_type,
            ) from e

    def _trace_mapped(
        self,
        written: object,
        written_path: str,
        read_path: str,
        value: Any,
        transformer: Optional[ITransformer],
    ) -> None:
        payload: Dict[str, Any] = {
            "object": type(written).__name__,
            "target_path": written_path,
            "source_property": read_path,
            "value": value,
            "transformer": transformer.supports() if transformer is not None else None,
        }
        self._logger.info(
            f"Mapping property into {type(written).__name__}.{written_path}",
            extra={"propmap": payload},
        )

    def _trace_skipped(self, target: object, target_path: str, source_property: str) -> None:
        self._logger.warning(
            f"Tried to access not writable property {target_path!r} "
            f"in target object {type(target).__name__}",
            extra={"propmap": {
                "object": type(target).__name__,
                "target_path": target_path,
                "source_property": source_property,
            }},
        )

    def _trace_unreadable(self, source: object, path: str) -> None:
        self._logger.debug(f"Skipping unreadable property {path!r} of {type(source).__name__}")


__all__ = ["MappingService", "DEFAULT_LOGGER_NAME"]
