from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from solowire.exceptions import SoloWireInvalidRegistrationError
from solowire.service_identifier import ServiceIdentifier
from solowire.types import Factory, Lifetime


@dataclass(frozen=True, slots=True)
class Registration:
    """A factory registered for an identifier."""

    identifier: ServiceIdentifier
    factory: Factory
    lifetime: Lifetime = Lifetime.SINGLETON


class FactoryRegistry:
    """Map identifiers to their registered factories.

    Registration data only: factories are not invoked here. Re-registering an
    identifier overwrites the previous registration.
    """

    __slots__ = ("_registrations",)

    def __init__(self) -> None:
        self._registrations: dict[ServiceIdentifier, Registration] = {}

    def set(
        self,
        identifier: ServiceIdentifier,
        factory: Factory,
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> Registration | None:
        """Store ``factory`` for ``identifier`` and return the registration it replaced.

        Raises:
            SoloWireInvalidRegistrationError: If ``factory`` is not callable.

        """
        if not callable(factory):
            raise SoloWireInvalidRegistrationError(identifier, factory)

        previous = self._registrations.get(identifier)
        self._registrations[identifier] = Registration(
            identifier=identifier,
            factory=factory,
            lifetime=Lifetime(lifetime),
        )
        return previous

    def get(self, identifier: ServiceIdentifier) -> Registration | None:
        return self._registrations.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registrations

    def __iter__(self) -> Iterator[ServiceIdentifier]:
        return iter(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)


class BindingMap:
    """Directed edges from abstract identifiers to concrete identifiers.

    Nothing is validated at bind time; the concrete side may not exist yet.
    """

    __slots__ = ("_bindings",)

    def __init__(self) -> None:
        self._bindings: dict[ServiceIdentifier, ServiceIdentifier] = {}

    def bind(
        self,
        abstract: ServiceIdentifier,
        concrete: ServiceIdentifier,
    ) -> ServiceIdentifier | None:
        """Store the edge and return the concrete identifier it replaced, if any."""
        previous = self._bindings.get(abstract)
        self._bindings[abstract] = concrete
        return previous

    def get(self, abstract: ServiceIdentifier) -> ServiceIdentifier | None:
        return self._bindings.get(abstract)

    def __contains__(self, abstract: object) -> bool:
        return abstract in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
