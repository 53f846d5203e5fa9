from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from solowire.service_identifier import ServiceKey
from solowire.types import Factory, Lifetime


class IContainer(ABC):
    """Interface for container-like objects.

    This is the surface application bootstrap code programs against:
    register services with ``set``/``set_multiple``/``bind`` and read them
    back with ``has``/``get``.
    """

    __slots__ = ()

    @abstractmethod
    def get(self, key: ServiceKey) -> Any:
        """Return the service for ``key``, constructing and caching it on first use.

        Raises:
            SoloWireNotFoundError: If nothing can provide ``key``.
            SoloWireResolutionError: If ``key`` is known but cannot be built.

        """

    @abstractmethod
    def has(self, key: ServiceKey) -> bool:
        """Return whether ``get(key)`` has something to resolve, without constructing it."""

    @abstractmethod
    def set(
        self,
        key: ServiceKey,
        factory: Factory,
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> None:
        """Register ``factory`` for ``key``; it receives the container when invoked."""

    @abstractmethod
    def set_multiple(self, services: Mapping[ServiceKey, Factory]) -> None:
        """Register many factories at once, in the mapping's iteration order."""

    @abstractmethod
    def bind(self, abstract: ServiceKey, concrete: ServiceKey) -> None:
        """Resolve ``abstract`` by resolving ``concrete`` instead."""
