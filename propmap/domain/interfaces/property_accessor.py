"""
Property Accessor Interface.

Generic get/set by property path over arbitrary objects.
"""

from abc import ABC, abstractmethod
from typing import Any


class IPropertyAccessor(ABC):
    """
    Interface for reading and writing property paths.

    A property path is a string identifying a (possibly nested) property,
    e.g. ``"customer.address.city"`` or ``"lines[0].sku"``.
    """

    @abstractmethod
    def is_readable(self, obj: object, path: str) -> bool:
        """
        Check if a path can be read on an object.

        Args:
            obj: Object to inspect
            path: Property path

        Returns:
            True if get_value would succeed
        """
        pass

    @abstractmethod
    def is_writable(self, obj: object, path: str) -> bool:
        """
        Check if a path can be written on an object.

        Args:
            obj: Object to inspect
            path: Property path

        Returns:
            True if set_value would succeed
        """
        pass

    @abstractmethod
    def get_value(self, obj: object, path: str) -> Any:
        """
        Read the value at a path.

        Raises:
            PropertyAccessError: If the path cannot be read
        """
        pass

    @abstractmethod
    def set_value(self, obj: object, path: str, value: Any) -> None:
        """
        Write a value at a path.

        Raises:
            PropertyAccessError: If the path cannot be written
        """
        pass
