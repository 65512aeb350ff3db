"""
Transformer Registry.

Immutable id -> transformer lookup table, built once at startup.

Discovery sources (``TransformerRegistry.discover``):
- Built-in transformers (EnumTransformer)
- Installed entry points in the ``propmap.transformers`` group
- Extra instances passed by the caller

Third-party packages expose transformers in their packaging metadata:

    [project.entry-points."propmap.transformers"]
    money = "shop.mapping:MoneyTransformer"
"""

import logging
from importlib.metadata import entry_points
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Sequence, Type

from propmap.domain.exceptions import DuplicateTransformerError, UnknownTransformerError
from propmap.domain.interfaces.transformer import ITransformer, ITransformerRegistry

from .enum_transformer import EnumTransformer

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_GROUP = "propmap.transformers"

BUILTIN_TRANSFORMERS: Sequence[Type[ITransformer]] = (EnumTransformer,)


class TransformerRegistry(ITransformerRegistry):
    """
    Read-only transformer registry.

    Usage:
        registry = TransformerRegistry([EnumTransformer()])
        transformer = registry.lookup(EnumTransformer.supports())
    """

    def __init__(self, transformers: Iterable[ITransformer] = ()):
        """
        Build the registry.

        Args:
            transformers: Transformer instances, keyed by their supports() id

        Raises:
            DuplicateTransformerError: If two transformers share an id
        """
        table: Dict[str, ITransformer] = {}
        for transformer in transformers:
            transformer_id = transformer.supports()
            if transformer_id in table:
                raise DuplicateTransformerError(transformer_id)
            table[transformer_id] = transformer
        self._transformers = MappingProxyType(table)

    @classmethod
    def with_builtins(cls, extra: Iterable[ITransformer] = ()) -> "TransformerRegistry":
        """Registry holding the built-in transformers plus ``extra``."""
        return cls([*(t() for t in BUILTIN_TRANSFORMERS), *extra])

    @classmethod
    def discover(
        cls,
        group: str = DEFAULT_ENTRY_POINT_GROUP,
        extra: Iterable[ITransformer] = (),
    ) -> "TransformerRegistry":
        """
        Build a registry from built-ins, installed entry points and extras.

        Entry points may reference a transformer class (instantiated with no
        arguments) or a ready instance.

        Args:
            group: Entry point group to scan
            extra: Additional transformer instances

        Returns:
            Populated registry
        """
        discovered: List[ITransformer] = []
        builtin_ids = {t.supports() for t in BUILTIN_TRANSFORMERS}

        for entry_point in entry_points(group=group):
            loaded = entry_point.load()
            transformer = loaded() if isinstance(loaded, type) else loaded
            if not isinstance(transformer, ITransformer):
                raise TypeError(
                    f"Entry point {entry_point.name!r} in group {group!r} "
                    f"does not provide an ITransformer: {loaded!r}"
                )
            if transformer.supports() in builtin_ids:
                continue
            logger.debug(f"Discovered transformer {transformer.supports()} via entry point {entry_point.name}")
            discovered.append(transformer)

        return cls.with_builtins([*discovered, *extra])

    def lookup(self, transformer_id: str) -> ITransformer:
        try:
            return self._transformers[transformer_id]
        except KeyError:
            raise UnknownTransformerError(transformer_id) from None

    def has(self, transformer_id: str) -> bool:
        return transformer_id in self._transformers

    def ids(self) -> List[str]:
        return list(self._transformers)

    def __contains__(self, transformer_id: object) -> bool:
        return transformer_id in self._transformers

    def __len__(self) -> int:
        return len(self._transformers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._transformers)


__all__ = [
    "DEFAULT_ENTRY_POINT_GROUP",
    "BUILTIN_TRANSFORMERS",
    "TransformerRegistry",
]
