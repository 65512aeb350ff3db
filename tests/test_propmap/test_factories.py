"""
Tests for MappingServiceFactory.
"""

import logging
from unittest.mock import patch

import pytest

from propmap.application.factories import ManagedMappingService, MappingServiceFactory
from propmap.application.services import MappingService
from propmap.config import MapperConfig, reset_config, set_config
from propmap.domain.exceptions import UnknownTransformerError
from propmap.infrastructure.database import (
    InMemoryPersistenceManager,
    SQLAlchemyPersistenceManager,
)
from propmap.infrastructure.transformers import EnumTransformer, TransformerRegistry

from tests.test_propmap.conftest import Status
from tests.test_propmap.test_persistence import Base, OrderRow
from tests.test_propmap.test_transformer_registry import UpperTransformer


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()


class TestCreateTransformerRegistry:
    """Tests for registry construction from config."""

    def test_without_discovery_uses_builtins(self):
        registry = MappingServiceFactory.create_transformer_registry(MapperConfig.for_testing())

        assert registry.ids() == [EnumTransformer.supports()]

    def test_discovery_scans_configured_group(self):
        config = MapperConfig(transformer_entry_point_group="acme.transformers")

        with patch("propmap.infrastructure.transformers.registry.entry_points", return_value=[]) as mock_eps:
            MappingServiceFactory.create_transformer_registry(config)

        mock_eps.assert_called_once_with(group="acme.transformers")

    def test_extra_transformers_added(self):
        registry = MappingServiceFactory.create_transformer_registry(
            MapperConfig.for_testing(), [UpperTransformer()]
        )

        assert registry.has("upper")


class TestCreate:
    """Tests for config-driven service creation."""

    def test_create_from_global_config(self):
        set_config(MapperConfig.for_testing())

        service = MappingServiceFactory.create()

        assert isinstance(service, MappingService)
        assert isinstance(service.persistence_manager, InMemoryPersistenceManager)

    def test_create_uses_configured_logger(self, order_dto, caplog):
        config = MapperConfig(discover_transformers=False, logger_name="acme.mapping")
        caplog.set_level(logging.INFO, logger="acme.mapping")

        MappingServiceFactory.create(config).map_to_target(order_dto)

        assert {r.name for r in caplog.records if r.levelno == logging.INFO} == {"acme.mapping"}

    def test_create_managed_closes_session(self):
        config = MapperConfig(
            persistence_mode="sqlalchemy",
            db_url="sqlite:///:memory:",
            discover_transformers=False,
        )

        with MappingServiceFactory.create_managed(config) as managed:
            assert isinstance(managed, ManagedMappingService)
            assert isinstance(managed.persistence_manager, SQLAlchemyPersistenceManager)
            assert managed.persistence_manager.session is not None

        assert managed.persistence_manager.session is None

    def test_create_managed_creates_missing_data_dir(self, tmp_path):
        data_dir = tmp_path / "fresh"
        config = MapperConfig.for_development(str(data_dir))
        config.discover_transformers = False

        with MappingServiceFactory.create_managed(config, metadata=Base.metadata) as managed:
            managed.persistence_manager.register(OrderRow(id=1, reference="ORD-1"))
            managed.persistence_manager.commit()

        assert (data_dir / "propmap.db").is_file()

    def test_explicit_db_url_does_not_create_data_dir(self, tmp_path):
        data_dir = tmp_path / "unused"
        config = MapperConfig(
            persistence_mode="sqlalchemy",
            db_url="sqlite:///:memory:",
            data_dir=str(data_dir),
        )

        MappingServiceFactory.create_persistence_manager(config)

        assert not data_dir.exists()

    def test_create_managed_rolls_back_on_error(self):
        with pytest.raises(RuntimeError):
            with MappingServiceFactory.create_managed(MapperConfig.for_testing()) as managed:
                managed.persistence_manager.register(object())
                raise RuntimeError("boom")

        assert managed.persistence_manager.pending == []
        assert managed.persistence_manager.rollback_count == 1


class TestCreateWithDependencies:
    """Tests for explicit wiring."""

    def test_defaults(self):
        service = MappingServiceFactory.create_with_dependencies()

        assert service.persistence_manager is None

    def test_uses_given_registry(self, order_dto):
        registry = TransformerRegistry([UpperTransformer()])
        service = MappingServiceFactory.create_with_dependencies(transformer_registry=registry)

        with pytest.raises(UnknownTransformerError) as exc_info:
            service.map_to_target(order_dto)

        assert exc_info.value.transformer_id == EnumTransformer.supports()


def test_create_for_testing_maps_and_flushes(order_dto):
    service = MappingServiceFactory.create_for_testing()

    target = service.map_to_target(order_dto, persist=True, flush=True)

    assert target.state == Status.ACTIVE.value
    assert service.persistence_manager.committed == [target]
