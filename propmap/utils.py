"""Import helpers shared by the resolver and transformers."""

import importlib
from typing import Any, Optional


def import_object(path: str) -> Optional[Any]:
    """
    Import an object from a dotted path.

    Accepts ``pkg.module.Name`` and ``pkg.module:Name.Nested``.

    Args:
        path: Dotted import path

    Returns:
        The imported object, or None when the path does not resolve

    Raises:
        ImportError: If the module exists but fails to import
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        return None

    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        # Errors raised while importing an existing module propagate
        if e.name is None or not (module_name == e.name or module_name.startswith(f"{e.name}.")):
            raise
        return None

    obj: Any = module
    for part in attr.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj


__all__ = ["import_object"]
