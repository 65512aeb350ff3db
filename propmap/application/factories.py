"""
Application Factories.

Factory pattern for creating the mapping service with proper dependency injection.

- create(): wire from MapperConfig (global config by default)
- create_managed(): same, with the persistence manager's session lifecycle managed
- create_for_testing(): in-memory persistence, built-in transformers
- create_with_dependencies(): explicit collaborators
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy import MetaData

from propmap.config import MapperConfig, get_config
from propmap.domain.interfaces.persistence import IPersistenceManager
from propmap.domain.interfaces.property_accessor import IPropertyAccessor
from propmap.domain.interfaces.transformer import ITransformer, ITransformerRegistry
from propmap.infrastructure.accessors import PropertyAccessor
from propmap.infrastructure.database import (
    InMemoryPersistenceManager,
    PersistenceManagerFactory,
)
from propmap.infrastructure.transformers import TransformerRegistry

from .services.mapping_service import MappingService


@dataclass
class ManagedMappingService:
    """
    MappingService with managed persistence lifecycle.

    Usage:
        with MappingServiceFactory.create_managed(config) as managed:
            managed.service.map_to_target(dto, persist=True, flush=True)
        # Session closed; rolled back if the block raised
    """
    service: MappingService
    persistence_manager: IPersistenceManager

    def __enter__(self) -> "ManagedMappingService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.persistence_manager.__exit__(exc_type, exc_val, exc_tb)
        return False


class MappingServiceFactory:
    """
    Factory for creating MappingService with proper dependencies.

    SOLID Compliance:
    - SRP: Creates services only
    - OCP: New persistence backends / transformers via configuration
    - DIP: MappingService depends on IPersistenceManager, ITransformerRegistry abstractions
    """

    @staticmethod
    def create_transformer_registry(
        config: Optional[MapperConfig] = None,
        extra: Iterable[ITransformer] = (),
    ) -> ITransformerRegistry:
        """Build the transformer registry described by the configuration."""
        if config is None:
            config = get_config()
        if config.discover_transformers:
            return TransformerRegistry.discover(config.transformer_entry_point_group, extra)
        return TransformerRegistry.with_builtins(extra)

    @staticmethod
    def create_persistence_manager(
        config: Optional[MapperConfig] = None,
        metadata: Optional[MetaData] = None,
    ) -> IPersistenceManager:
        """Create the persistence manager described by the configuration."""
        if config is None:
            config = get_config()
        if config.persistence_mode == "sqlalchemy" and config.db_url == config.default_db_url():
            config.ensure_data_dir()
        return PersistenceManagerFactory.create(
            mode=config.persistence_mode,
            db_url=config.db_url,
            echo=config.log_sql,
            metadata=metadata,
        )

    @staticmethod
    def create(
        config: Optional[MapperConfig] = None,
        metadata: Optional[MetaData] = None,
        extra_transformers: Iterable[ITransformer] = (),
    ) -> MappingService:
        """
        Create MappingService based on configuration.

        WARNING: The persistence manager is entered but its exit is NOT
        managed. Prefer create_managed() for proper resource management.
        """
        if config is None:
            config = get_config()

        persistence_manager = MappingServiceFactory.create_persistence_manager(config, metadata)
        persistence_manager.__enter__()

        return MappingServiceFactory.create_with_dependencies(
            persistence_manager=persistence_manager,
            transformer_registry=MappingServiceFactory.create_transformer_registry(
                config, extra_transformers
            ),
            logger=logging.getLogger(config.logger_name),
        )

    @staticmethod
    def create_managed(
        config: Optional[MapperConfig] = None,
        metadata: Optional[MetaData] = None,
        extra_transformers: Iterable[ITransformer] = (),
    ) -> ManagedMappingService:
        """
        Create a MappingService whose persistence manager is closed on exit.

        Returns:
            ManagedMappingService context manager
        """
        service = MappingServiceFactory.create(config, metadata, extra_transformers)
        return ManagedMappingService(
            service=service,
            persistence_manager=service.persistence_manager,
        )

    @staticmethod
    def create_with_dependencies(
        persistence_manager: Optional[IPersistenceManager] = None,
        transformer_registry: Optional[ITransformerRegistry] = None,
        property_accessor: Optional[IPropertyAccessor] = None,
        logger: Optional[logging.Logger] = None,
    ) -> MappingService:
        """Create MappingService with explicit dependencies."""
        return MappingService(
            transformer_registry=(
                transformer_registry if transformer_registry is not None
                else TransformerRegistry.with_builtins()
            ),
            persistence_manager=persistence_manager,
            property_accessor=property_accessor or PropertyAccessor(),
            logger=logger,
        )

    @staticmethod
    def create_for_testing(
        extra_transformers: Iterable[ITransformer] = (),
    ) -> MappingService:
        """Create MappingService for unit tests."""
        return MappingServiceFactory.create_with_dependencies(
            persistence_manager=InMemoryPersistenceManager(),
            transformer_registry=TransformerRegistry.with_builtins(extra_transformers),
        )


__all__ = ["MappingServiceFactory", "ManagedMappingService"]
