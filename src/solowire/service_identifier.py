from __future__ import annotations

from typing import Any, TypeAlias

ServiceIdentifier: TypeAlias = str
"""An opaque string naming either an arbitrary service or a concrete type."""

ServiceKey: TypeAlias = str | type[Any]
"""Anything the public container API accepts where an identifier is expected."""


def identifier_of_type(cls: type[Any]) -> ServiceIdentifier:
    """Return the identifier a class is known by: ``"<module>.<qualname>"``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def to_identifier(key: ServiceKey) -> ServiceIdentifier:
    """Normalize a public key to its string identifier.

    Args:
        key: A string identifier (returned unchanged) or a class.

    Raises:
        TypeError: If ``key`` is neither a string nor a class.

    """
    if isinstance(key, str):
        return key
    if isinstance(key, type):
        return identifier_of_type(key)
    msg = f"Service identifier must be a string or a class, got {key!r}."
    raise TypeError(msg)


__all__ = ["ServiceIdentifier", "ServiceKey", "identifier_of_type", "to_identifier"]
