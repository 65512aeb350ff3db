"""
Pytest fixtures for propmap tests.

Sample mapping-aware classes live at module level so their annotations
resolve through typing.get_type_hints.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

import pytest

from propmap.domain.models import MappingAware, mapping_aware
from propmap.infrastructure.accessors import PropertyAccessor
from propmap.infrastructure.database import InMemoryPersistenceManager
from propmap.infrastructure.transformers import EnumTransformer, TransformerRegistry
from propmap.application.services import MappingService


# ═══════════════════════════════════════════════════════════════════════════════
# Sample Domain
# ═══════════════════════════════════════════════════════════════════════════════


class Status(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


class Address:
    def __init__(self, city: Optional[str] = None):
        self.city = city


class OrderEntity:
    """Plain target object, as an ORM entity would look without the ORM."""

    def __init__(self):
        self.reference: Optional[str] = None
        self.state: Optional[str] = None
        self.tags: List[str] = []
        self.total: float = 0.0
        self.payload: Dict[str, Any] = {}
        self.address = Address()

    @property
    def label(self) -> str:
        return f"order {self.reference}"


@mapping_aware(target=OrderEntity)
@dataclass
class OrderDTO:
    reference: Annotated[Optional[str], MappingAware()] = None
    status: Annotated[Optional[Status], MappingAware(
        target="state",
        transformer=EnumTransformer,
        options={"enum": Status},
    )] = None
    labels: Annotated[List[Status], MappingAware(
        target="tags",
        transformer=EnumTransformer,
        options={"enum": Status},
    )] = field(default_factory=list)
    total: float = field(default=0.0, metadata={"propmap": MappingAware()})
    payload: Annotated[Dict[str, Any], MappingAware()] = field(default_factory=dict)
    city: Annotated[Optional[str], MappingAware(target="address.city")] = None
    note: str = ""


@mapping_aware(target=OrderEntity)
@dataclass
class LabelDTO:
    """Maps onto the read-only ``label`` property of OrderEntity."""
    reference: Annotated[Optional[str], MappingAware()] = None
    title: Annotated[Optional[str], MappingAware(target="label")] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def accessor() -> PropertyAccessor:
    return PropertyAccessor()


@pytest.fixture
def registry() -> TransformerRegistry:
    return TransformerRegistry.with_builtins()


@pytest.fixture
def persistence_manager() -> InMemoryPersistenceManager:
    return InMemoryPersistenceManager()


@pytest.fixture
def service(registry, persistence_manager, accessor) -> MappingService:
    return MappingService(
        transformer_registry=registry,
        persistence_manager=persistence_manager,
        property_accessor=accessor,
    )


@pytest.fixture
def order_dto() -> OrderDTO:
    return OrderDTO(
        reference="ORD-1",
        status=Status.ACTIVE,
        labels=[Status.ACTIVE, Status.ARCHIVED],
        total=42.5,
        payload={"source": "web"},
        city="Lyon",
        note="not mapped",
    )
