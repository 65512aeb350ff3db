"""
Mapping Exceptions.

Custom exceptions for the property mapper.
Follows exception hierarchy pattern for precise error handling.

Hierarchy:
    MappingError
    ├── NotMappableError
    ├── TargetInstantiationError
    ├── UnknownTransformerError
    ├── DuplicateTransformerError
    ├── PropertyAccessError
    └── TransformerError
        ├── MissingOptionError
        ├── InvalidEnumTypeError
        ├── WrongDataTypeError
        └── UnknownEnumValueError
"""

from typing import Any, Optional


class MappingError(Exception):
    """
    Base exception for mapping errors.

    All mapper exceptions inherit from this.
    Allows catching all mapping errors with one handler.
    """
    pass


class NotMappableError(MappingError):
    """
    Object cannot be mapped.

    Raised when:
    - The class carries no class-level mapping annotation
    - No target type is declared on the class-level annotation
    - The declared target cannot be resolved to a class
    - Class-level annotations declare conflicting target types
    """

    def __init__(self, message: str, source_type: Optional[type] = None):
        super().__init__(message)
        self.source_type = source_type


class TargetInstantiationError(MappingError):
    """Declared target type could not be instantiated without arguments."""

    def __init__(self, message: str, target_type: Optional[type] = None):
        super().__init__(message)
        self.target_type = target_type


class UnknownTransformerError(MappingError):
    """No transformer is registered under the requested id."""

    def __init__(self, transformer_id: str):
        super().__init__(f"No transformer registered for id: {transformer_id}")
        self.transformer_id = transformer_id


class DuplicateTransformerError(MappingError):
    """Two transformers claim the same id."""

    def __init__(self, transformer_id: str):
        super().__init__(f"Transformer id already registered: {transformer_id}")
        self.transformer_id = transformer_id


class PropertyAccessError(MappingError):
    """
    Property path could not be read or written.

    Raised by the property accessor; the mapping service checks
    readability/writability first and never lets this escape for
    skipped properties.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


# ═══════════════════════════════════════════════════════════════════════════════
# Transformer Errors
# ═══════════════════════════════════════════════════════════════════════════════


class TransformerError(MappingError):
    """Base exception for failures inside a transformer invocation."""
    pass


class MissingOptionError(TransformerError):
    """A transformer option required for this conversion is absent."""

    def __init__(self, option: str, transformer: str):
        super().__init__(
            f"option {option} must be specified to use this reverse transformer: {transformer}"
        )
        self.option = option
        self.transformer = transformer


class InvalidEnumTypeError(TransformerError):
    """The referenced enum type does not exist or is not an Enum."""

    def __init__(self, reference: Any):
        super().__init__(f"enum class does not exist: {reference!r}")
        self.reference = reference


class WrongDataTypeError(TransformerError):
    """Value handed to a transformer has a type it cannot convert."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnknownEnumValueError(TransformerError):
    """Primitive does not match any variant (strict reverse transform only)."""

    def __init__(self, enum_type: type, value: Any):
        super().__init__(f"{value!r} is not a valid {enum_type.__name__}")
        self.enum_type = enum_type
        self.value = value


__all__ = [
    "MappingError",
    "NotMappableError",
    "TargetInstantiationError",
    "UnknownTransformerError",
    "DuplicateTransformerError",
    "PropertyAccessError",
    "TransformerError",
    "MissingOptionError",
    "InvalidEnumTypeError",
    "WrongDataTypeError",
    "UnknownEnumValueError",
]
