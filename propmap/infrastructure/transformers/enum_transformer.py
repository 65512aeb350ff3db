"""
Enum Transformer.

Two-way conversion between ``Enum`` members and their underlying primitive
values.

Options:
    enum: Enum class, or dotted import path to it (required for reverse_transform)
    strict: Raise on primitives matching no member instead of yielding None

Usage:
    status: Annotated[Status, MappingAware(
        target="state",
        transformer=EnumTransformer,
        options={"enum": Status},
    )]
"""

from enum import Enum
from typing import Any, Mapping, Optional, Type

from propmap.domain.exceptions import (
    InvalidEnumTypeError,
    MissingOptionError,
    UnknownEnumValueError,
    WrongDataTypeError,
)
from propmap.domain.interfaces.transformer import ITransformer
from propmap.utils import import_object


class EnumTransformer(ITransformer):
    """
    Enum <-> primitive transformer.

    transform:
    - list/tuple of members -> list of values
    - single member -> its value
    - None -> None

    reverse_transform:
    - None -> [] (empty collection)
    - list/tuple of primitives -> list of members
    - single primitive -> member
    - unmatched primitive -> None (UnknownEnumValueError when strict)
    """

    def transform(
        self,
        value: Any,
        options: Mapping[str, Any],
        target_object: Optional[object] = None,
        mapped_object: Optional[object] = None,
    ) -> Any:
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return [self._to_primitive(item) for item in value]
        return self._to_primitive(value)

    def reverse_transform(
        self,
        value: Any,
        options: Mapping[str, Any],
        target_object: Optional[object] = None,
        mapped_object: Optional[object] = None,
    ) -> Any:
        enum_type = self._resolve_enum(options)
        strict = bool(options.get("strict", False))

        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [self._from_primitive(enum_type, item, strict) for item in value]
        return self._from_primitive(enum_type, value, strict)

    @staticmethod
    def _to_primitive(member: Any) -> Any:
        if not isinstance(member, Enum):
            raise WrongDataTypeError(
                f"EnumTransformer expects Enum members, got {type(member).__name__}",
                member,
            )
        return member.value

    @staticmethod
    def _from_primitive(enum_type: Type[Enum], value: Any, strict: bool) -> Optional[Enum]:
        try:
            return enum_type(value)
        except ValueError as e:
            if strict:
                raise UnknownEnumValueError(enum_type, value) from e
            return None

    def _resolve_enum(self, options: Mapping[str, Any]) -> Type[Enum]:
        """
        Resolve the ``enum`` option to an Enum class.

        Raises:
            MissingOptionError: If the option is absent
            InvalidEnumTypeError: If the reference does not resolve to an Enum subclass
        """
        reference = options.get("enum") if options else None
        if reference is None:
            raise MissingOptionError("enum", self.supports())

        enum_type = reference
        if isinstance(reference, str):
            enum_type = import_object(reference)

        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise InvalidEnumTypeError(reference)
        return enum_type


__all__ = ["EnumTransformer"]
