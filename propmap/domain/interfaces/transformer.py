"""
Transformer Interfaces.

Defines the contract for two-way value conversion during property mapping,
and for the registry the mapping service looks transformers up in.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional


class ITransformer(ABC):
    """
    Interface for pluggable two-way value converters.

    Responsibilities:
    - Convert a source value before it is written to the target (transform)
    - Convert a target value before it is written back to the source
      (reverse_transform)

    Implementations receive the objects on both sides of the mapping so a
    conversion may depend on context:
    - target_object: the object without mapping metadata
    - mapped_object: the mapping-aware object

    Implementations:
    - EnumTransformer: Enum <-> underlying primitive value
    """

    @classmethod
    def supports(cls) -> str:
        """
        Get the id this transformer is registered under.

        Defaults to the dotted class path so annotations may reference a
        transformer by its class.

        Returns:
            Transformer id
        """
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def transform(
        self,
        value: Any,
        options: Mapping[str, Any],
        target_object: Optional[object] = None,
        mapped_object: Optional[object] = None,
    ) -> Any:
        """
        Convert a value read from the mapping-aware object.

        Args:
            value: Raw value of the source property
            options: Options declared on the property annotation
            target_object: Object being written to
            mapped_object: Mapping-aware object being read from

        Returns:
            Value to write to the target path
        """
        pass

    @abstractmethod
    def reverse_transform(
        self,
        value: Any,
        options: Mapping[str, Any],
        target_object: Optional[object] = None,
        mapped_object: Optional[object] = None,
    ) -> Any:
        """
        Convert a value read from the target path back to the source representation.

        Args:
            value: Raw value read from the external object
            options: Options declared on the property annotation
            target_object: External object being read from
            mapped_object: Mapping-aware object being written to

        Returns:
            Value to write to the mapping-aware property
        """
        pass


class ITransformerRegistry(ABC):
    """
    Registry of transformers.

    Maps transformer ids to instances. Populated once, read-only afterwards.
    """

    @abstractmethod
    def lookup(self, transformer_id: str) -> ITransformer:
        """
        Get the transformer registered under an id.

        Args:
            transformer_id: Id as returned by ITransformer.supports()

        Returns:
            Transformer instance

        Raises:
            UnknownTransformerError: If no transformer is registered for the id
        """
        pass

    @abstractmethod
    def has(self, transformer_id: str) -> bool:
        """Check whether an id is registered."""
        pass

    @abstractmethod
    def ids(self) -> List[str]:
        """List registered ids."""
        pass
