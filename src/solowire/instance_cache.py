from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Any

from solowire.service_identifier import ServiceIdentifier


class InstanceCache:
    """Per-identifier memoization of constructed values.

    Membership, not truthiness, decides whether an identifier is cached, so
    ``None`` and other falsy values are valid singletons. The first stored
    value for an identifier wins; later stores are ignored.
    """

    __slots__ = ("_instances", "_locks", "_locks_lock")

    def __init__(self) -> None:
        self._instances: dict[ServiceIdentifier, Any] = {}
        # Per-identifier locks serialize first construction of one identifier only
        self._locks: dict[ServiceIdentifier, threading.Lock] = {}
        self._locks_lock = threading.Lock()

    def has_instance(self, identifier: ServiceIdentifier) -> bool:
        return identifier in self._instances

    def get_instance(self, identifier: ServiceIdentifier) -> Any:
        """Return the cached value for ``identifier``.

        Raises:
            KeyError: If nothing is cached for ``identifier``.

        """
        return self._instances[identifier]

    def store(self, identifier: ServiceIdentifier, value: Any) -> Any:
        """Cache ``value`` unless a value is already cached, and return the cached value."""
        return self._instances.setdefault(identifier, value)

    def lock_for(self, identifier: ServiceIdentifier) -> threading.Lock:
        """Get or create the construction lock for ``identifier``.

        Uses double-checked locking to minimize lock contention.
        """
        lock = self._locks.get(identifier)
        if lock is None:
            with self._locks_lock:
                # Second check after acquiring lock - race timing dependent
                lock = self._locks.get(identifier)
                if lock is None:
                    lock = threading.Lock()
                    self._locks[identifier] = lock
        return lock

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._instances

    def __iter__(self) -> Iterator[ServiceIdentifier]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)
