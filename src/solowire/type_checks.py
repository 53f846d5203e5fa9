from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a plain runtime class, not a generic alias.

    Args:
        candidate: Value being checked, usually a constructor annotation.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_protocol_class(cls: type[Any]) -> bool:
    """Return true for ``typing.Protocol`` subclasses that are themselves protocols."""
    return bool(getattr(cls, "_is_protocol", False))


def is_abstract_class(cls: type[Any]) -> bool:
    """Return true when ``cls`` cannot be instantiated directly."""
    return inspect.isabstract(cls) or is_protocol_class(cls)


__all__ = ["is_abstract_class", "is_protocol_class", "is_runtime_class"]
