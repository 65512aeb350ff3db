"""
Property Accessor Implementation.

Reads and writes property paths on arbitrary Python objects.

Path syntax:
- ``name``            attribute (or key, when the object is a mapping)
- ``address.city``    nested attribute
- ``lines[0]``        sequence index
- ``[meta][tag]``     mapping keys

Writability rules for the last segment:
- Mappings and mutable sequences: writable (sequence index must exist)
- ``property``: writable only if it has a setter
- Data descriptors (``__slots__`` members, SQLAlchemy instrumented attributes): writable
- Frozen dataclasses and frozen pydantic models: not writable
- Plain objects: writable if the attribute already exists on the instance
  or is declared on the class (annotations, dataclass fields, class defaults)
"""

import dataclasses
import inspect
import re
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, List, NamedTuple, Set

from pydantic import BaseModel

from propmap.domain.exceptions import PropertyAccessError
from propmap.domain.interfaces.property_accessor import IPropertyAccessor


_SEGMENT = re.compile(r"\[(?P<index>[^\]]+)\]|(?P<name>[^.\[\]]+)")
_MISSING = object()


class _Segment(NamedTuple):
    name: str
    is_index: bool


class PropertyAccessor(IPropertyAccessor):
    """
    Default property accessor.

    Stateless; a single instance may be shared between mapping services.
    """

    def is_readable(self, obj: object, path: str) -> bool:
        try:
            self.get_value(obj, path)
        except PropertyAccessError:
            return False
        return True

    def is_writable(self, obj: object, path: str) -> bool:
        try:
            segments = self._parse(path)
            parent = self._walk(obj, segments[:-1], path)
        except PropertyAccessError:
            return False
        if parent is None:
            return False
        return self._can_write(parent, segments[-1])

    def get_value(self, obj: object, path: str) -> Any:
        return self._walk(obj, self._parse(path), path)

    def set_value(self, obj: object, path: str, value: Any) -> None:
        segments = self._parse(path)
        parent = self._walk(obj, segments[:-1], path)
        if parent is None or not self._can_write(parent, segments[-1]):
            raise PropertyAccessError(
                f"Property path {path!r} is not writable on {type(obj).__name__}", path
            )

        last = segments[-1]
        try:
            if last.is_index:
                parent[self._index_key(parent, last.name, path)] = value
            elif isinstance(parent, MutableMapping):
                parent[last.name] = value
            else:
                setattr(parent, last.name, value)
        except (AttributeError, TypeError, ValueError, KeyError, IndexError) as e:
            raise PropertyAccessError(
                f"Failed to write {path!r} on {type(obj).__name__}: {e}", path
            ) from e

    # ═══════════════════════════════════════════════════════════════════════════
    # Path handling
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _parse(path: str) -> List[_Segment]:
        """Split a property path into segments."""
        if not path:
            raise PropertyAccessError("Property path must not be empty", path)

        segments: List[_Segment] = []
        pos = 0
        while pos < len(path):
            match = _SEGMENT.match(path, pos)
            if match is None:
                raise PropertyAccessError(f"Invalid property path: {path!r}", path)
            if match.group("index") is not None:
                segments.append(_Segment(match.group("index"), True))
            else:
                segments.append(_Segment(match.group("name"), False))
            pos = match.end()

            if pos < len(path) and path[pos] == ".":
                pos += 1
                if pos == len(path):
                    raise PropertyAccessError(f"Invalid property path: {path!r}", path)
        return segments

    def _walk(self, obj: Any, segments: List[_Segment], path: str) -> Any:
        current = obj
        for segment in segments:
            if current is None:
                raise PropertyAccessError(
                    f"Cannot read {segment.name!r} of None in path {path!r}", path
                )
            current = self._read_segment(current, segment, path)
        return current

    def _read_segment(self, current: Any, segment: _Segment, path: str) -> Any:
        if segment.is_index:
            if not self._is_indexable(current):
                raise PropertyAccessError(
                    f"Cannot index {type(current).__name__} in path {path!r}", path
                )
            key = self._index_key(current, segment.name, path)
            try:
                return current[key]
            except (KeyError, IndexError) as e:
                raise PropertyAccessError(f"No index {segment.name!r} in path {path!r}", path) from e

        if isinstance(current, Mapping):
            if segment.name not in current:
                raise PropertyAccessError(f"No key {segment.name!r} in path {path!r}", path)
            return current[segment.name]

        try:
            return getattr(current, segment.name)
        except AttributeError as e:
            raise PropertyAccessError(
                f"{type(current).__name__} has no property {segment.name!r}", path
            ) from e

    @staticmethod
    def _is_indexable(obj: Any) -> bool:
        if isinstance(obj, Mapping):
            return True
        return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))

    @staticmethod
    def _index_key(container: Any, raw: str, path: str) -> Any:
        """Convert an index segment to the key the container expects."""
        if isinstance(container, Mapping):
            if raw not in container and raw.lstrip("-").isdigit() and int(raw) in container:
                return int(raw)
            return raw
        try:
            return int(raw)
        except ValueError as e:
            raise PropertyAccessError(f"Sequence index must be an integer in path {path!r}", path) from e

    # ═══════════════════════════════════════════════════════════════════════════
    # Writability
    # ═══════════════════════════════════════════════════════════════════════════

    def _can_write(self, parent: Any, segment: _Segment) -> bool:
        if segment.is_index:
            if isinstance(parent, MutableMapping):
                return True
            if isinstance(parent, MutableSequence):
                try:
                    index = int(segment.name)
                except ValueError:
                    return False
                return -len(parent) <= index < len(parent)
            return False

        name = segment.name
        if isinstance(parent, MutableMapping):
            return True
        if isinstance(parent, Mapping):
            return False

        attr = inspect.getattr_static(type(parent), name, _MISSING)
        if isinstance(attr, property):
            return attr.fset is not None

        if isinstance(parent, BaseModel):
            return self._can_write_model(parent, name)

        if dataclasses.is_dataclass(parent) and parent.__dataclass_params__.frozen:
            return False

        if attr is not _MISSING and hasattr(type(attr), "__set__"):
            return True

        instance_dict = getattr(parent, "__dict__", None)
        if instance_dict is None:
            return False
        if name in instance_dict or name in self._declared_fields(type(parent)):
            return True
        return attr is not _MISSING and not callable(attr)

    @staticmethod
    def _can_write_model(model: BaseModel, name: str) -> bool:
        model_type = type(model)
        if model_type.model_config.get("frozen", False):
            return False
        field_info = model_type.model_fields.get(name)
        if field_info is not None:
            return not field_info.frozen
        return model_type.model_config.get("extra") == "allow"

    @staticmethod
    def _declared_fields(cls: type) -> Set[str]:
        names: Set[str] = set()
        for klass in cls.__mro__:
            names.update(inspect.get_annotations(klass).keys())
        if dataclasses.is_dataclass(cls):
            names.update(f.name for f in dataclasses.fields(cls))
        return names


__all__ = ["PropertyAccessor"]
