"""
Tests for MapperConfig and global configuration helpers.
"""

import logging

import pytest

from propmap.config import (
    MapperConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)
from propmap.infrastructure.transformers.registry import DEFAULT_ENTRY_POINT_GROUP


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()


class TestMapperConfig:
    """Tests for construction and presets."""

    def test_defaults(self):
        config = MapperConfig()

        assert config.persistence_mode == "inmemory"
        assert config.db_url is None
        assert config.discover_transformers is True
        assert config.transformer_entry_point_group == DEFAULT_ENTRY_POINT_GROUP
        assert config.logger_name == "propmap.mapping"

    def test_sqlalchemy_mode_defaults_db_url(self):
        config = MapperConfig(persistence_mode="sqlalchemy", data_dir="/tmp/pm")

        assert config.db_url == "sqlite:////tmp/pm/propmap.db"

    def test_explicit_db_url_kept(self):
        config = MapperConfig(persistence_mode="sqlalchemy", db_url="postgresql://h/db")

        assert config.db_url == "postgresql://h/db"

    def test_for_testing(self):
        config = MapperConfig.for_testing()

        assert config.persistence_mode == "inmemory"
        assert config.discover_transformers is False
        assert config.log_level == "DEBUG"

    def test_for_development(self):
        config = MapperConfig.for_development("dev")

        assert config.persistence_mode == "sqlalchemy"
        assert config.db_url == "sqlite:///dev/propmap.db"
        assert config.log_sql is True

    def test_for_production(self):
        config = MapperConfig.for_production("postgresql://h/db")

        assert config.db_url == "postgresql://h/db"
        assert config.log_sql is False
        assert config.log_level == "WARNING"

    def test_dict_round_trip(self):
        config = MapperConfig.for_development("dev")

        assert MapperConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        assert MapperConfig.from_dict({}) == MapperConfig()

    def test_ensure_data_dir(self, tmp_path):
        config = MapperConfig(data_dir=str(tmp_path / "nested" / "data"))

        path = config.ensure_data_dir()

        assert path.is_dir()

    def test_default_db_url_lives_in_data_dir(self):
        config = MapperConfig(persistence_mode="sqlalchemy", data_dir="var")

        assert config.db_url == config.default_db_url() == "sqlite:///var/propmap.db"


class TestFromEnv:
    """Tests for environment-driven configuration."""

    def test_defaults_without_env(self, monkeypatch):
        for name in (
            "PROPMAP_PERSISTENCE_MODE",
            "PROPMAP_DATABASE_URL",
            "PROPMAP_DISCOVER_TRANSFORMERS",
            "PROPMAP_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = MapperConfig.from_env()

        assert config.persistence_mode == "inmemory"
        assert config.discover_transformers is True
        assert config.log_level == "INFO"

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("PROPMAP_PERSISTENCE_MODE", "sqlalchemy")
        monkeypatch.setenv("PROPMAP_DATABASE_URL", "sqlite:///:memory:")
        monkeypatch.setenv("PROPMAP_DISCOVER_TRANSFORMERS", "false")
        monkeypatch.setenv("PROPMAP_TRANSFORMER_GROUP", "acme.transformers")
        monkeypatch.setenv("PROPMAP_LOGGER", "acme.mapping")
        monkeypatch.setenv("PROPMAP_LOG_SQL", "TRUE")

        config = MapperConfig.from_env()

        assert config.persistence_mode == "sqlalchemy"
        assert config.db_url == "sqlite:///:memory:"
        assert config.discover_transformers is False
        assert config.transformer_entry_point_group == "acme.transformers"
        assert config.logger_name == "acme.mapping"
        assert config.log_sql is True


class TestGlobalConfig:
    """Tests for get/set/reset."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self):
        config = MapperConfig.for_testing()

        set_config(config)

        assert get_config() is config

    def test_reset_config(self):
        config = MapperConfig.for_testing()
        set_config(config)

        reset_config()

        assert get_config() is not config


def test_configure_logging_sets_package_level():
    package_logger = logging.getLogger("propmap")
    previous = package_logger.level
    try:
        result = configure_logging(MapperConfig(log_level="warning"))

        assert result is package_logger
        assert package_logger.level == logging.WARNING
        assert not logging.getLogger("propmap.mapping").isEnabledFor(logging.INFO)
    finally:
        package_logger.setLevel(previous)
