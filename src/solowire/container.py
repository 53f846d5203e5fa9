from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager, nullcontext, suppress
from typing import Any, TypeVar

from solowire.container_interface import IContainer
from solowire.defaults import DEFAULT_LIFETIME, DEFAULT_LOCK_MODE
from solowire.exceptions import (
    SoloWireError,
    SoloWireNotFoundError,
    SoloWireNotInstantiableError,
    SoloWireTypeIntrospectionError,
    SoloWireUnresolvableParameterError,
)
from solowire.instance_cache import InstanceCache
from solowire.lock_mode import LockMode
from solowire.registry import BindingMap, FactoryRegistry, Registration
from solowire.resolution_stack import resolving
from solowire.service_identifier import (
    ServiceIdentifier,
    ServiceKey,
    identifier_of_type,
    to_identifier,
)
from solowire.type_registry import ConstructorParameter, ReflectiveTypeRegistry, TypeRegistry
from solowire.types import Factory, Lifetime

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Dependency injection container for registering and resolving services.

    Lookup order for an identifier is: cached instance, registered factory,
    binding, then reflective construction of the named class. Whatever the
    first lookup produces is cached under the requested identifier and
    returned by every later lookup.

    Identifiers are strings. Classes are accepted wherever an identifier is
    expected and stand for ``"<module>.<qualname>"``.

    The container caches itself under its own class and under ``IContainer``,
    so factories and constructors that declare either receive it.
    """

    __slots__ = (
        "_bindings",
        "_factories",
        "_instances",
        "_lock_mode",
        "_registrations_lock",
        "_type_registry",
    )

    def __init__(
        self,
        services: Mapping[ServiceKey, Factory] | None = None,
        *,
        type_registry: TypeRegistry | None = None,
        lock_mode: LockMode = DEFAULT_LOCK_MODE,
    ) -> None:
        """Initialize a container, optionally with initial services.

        Args:
            services: Factories to register right away, as with ``set_multiple``.
            type_registry: Capability used for reflective construction. Defaults
                to a ``ReflectiveTypeRegistry`` that may import dotted identifiers.
            lock_mode: ``LockMode.THREAD`` guards each identifier's first
                construction so it happens at most once across threads;
                ``LockMode.NONE`` skips locking for single-threaded use.

        Raises:
            SoloWireInvalidRegistrationError: If an initial service is not callable.

        Examples:
            .. code-block:: python

                container = Container({"clock": lambda c: SystemClock()})

                strict_container = Container(
                    type_registry=ReflectiveTypeRegistry(import_types=False),
                )

        """
        self._factories = FactoryRegistry()
        self._bindings = BindingMap()
        self._instances = InstanceCache()
        self._type_registry: TypeRegistry = type_registry or ReflectiveTypeRegistry()
        self._lock_mode = lock_mode
        self._registrations_lock = threading.Lock()

        self._instances.store(identifier_of_type(type(self)), self)
        self._instances.store(identifier_of_type(IContainer), self)

        if services:
            self.set_multiple(services)

    # region Registration Methods
    def set(
        self,
        key: ServiceKey,
        factory: Factory,
        lifetime: Lifetime = DEFAULT_LIFETIME,
    ) -> None:
        """Register a factory for ``key``.

        The factory is called lazily with the container as its only argument.
        Re-registering overwrites the previous factory, but an instance that
        is already cached for ``key`` keeps being returned.

        Args:
            key: Identifier (or class) the factory provides.
            factory: Callable taking the container and returning the service.
            lifetime: ``SINGLETON`` caches the first result; ``TRANSIENT`` calls
                the factory on every lookup of ``key``.

        Raises:
            SoloWireInvalidRegistrationError: If ``factory`` is not callable.

        """
        identifier = to_identifier(key)
        with self._registrations_lock:
            previous = self._factories.set(identifier, factory, lifetime)

        if previous is not None:
            logger.debug("Factory for [%s] replaced", identifier)
        if identifier in self._instances:
            logger.debug("Factory for [%s] registered after it was cached; ignored", identifier)

    def set_multiple(self, services: Mapping[ServiceKey, Factory]) -> None:
        """Register many factories in the mapping's iteration order.

        Each entry is checked before it is registered. The first non-callable
        entry raises; entries before it stay registered and entries after it
        are not registered.

        Raises:
            SoloWireInvalidRegistrationError: For the first non-callable entry.

        """
        for key, factory in services.items():
            self.set(key, factory)

    def bind(self, abstract: ServiceKey, concrete: ServiceKey) -> None:
        """Resolve ``abstract`` through ``concrete``.

        Nothing is validated here; ``concrete`` only needs to be resolvable
        when ``abstract`` is first requested. Bindings may chain.
        """
        abstract_identifier = self._identify(abstract)
        concrete_identifier = self._identify(concrete)
        with self._registrations_lock:
            previous = self._bindings.bind(abstract_identifier, concrete_identifier)

        if previous is not None and previous != concrete_identifier:
            logger.debug(
                "Binding for [%s] changed from [%s] to [%s]",
                abstract_identifier,
                previous,
                concrete_identifier,
            )

    def register_type(self, cls: type[Any], name: ServiceIdentifier | None = None) -> str:
        """Make ``cls`` resolvable by reflection and return its identifier.

        With ``name``, the name is bound to the class identifier so both
        share one cached instance.
        """
        identifier = self._type_registry.register(cls)
        if name is not None and name != identifier:
            self.bind(name, identifier)
            return name
        return identifier

    def factory(self, key: ServiceKey, *, lifetime: Lifetime = DEFAULT_LIFETIME) -> Callable[[F], F]:
        """Register the decorated callable as the factory for ``key``.

        Examples:
            .. code-block:: python

                @container.factory("mailer")
                def build_mailer(c: IContainer) -> Mailer:
                    return Mailer(c.get("smtp.host"))

        """

        def decorator(func: F) -> F:
            self.set(key, func, lifetime=lifetime)
            return func

        return decorator

    # endregion Registration Methods

    # region Resolution Methods
    def has(self, key: ServiceKey) -> bool:
        if isinstance(key, type) and self._type_registry.is_reflectable(key):
            return True

        identifier = to_identifier(key)
        if identifier in self._instances:
            return True
        with self._registrations_lock:
            if identifier in self._factories or identifier in self._bindings:
                return True
        # A dotted identifier may import a module that fails to load
        with suppress(Exception):
            return self._type_registry.knows(identifier)
        return False

    def get(self, key: ServiceKey) -> Any:
        identifier = self._identify(key)
        # Fast path: cached instances need no locking
        if identifier in self._instances:
            return self._instances.get_instance(identifier)

        with resolving(identifier):
            with self._registrations_lock:
                registration = self._factories.get(identifier)
                concrete = self._bindings.get(identifier)

            if registration is not None and registration.lifetime is Lifetime.TRANSIENT:
                return registration.factory(self)

            with self._construction_guard(identifier):
                # Double-check: another thread may have built it while we waited
                if identifier in self._instances:
                    return self._instances.get_instance(identifier)
                instance = self._construct(identifier, registration, concrete)
                return self._instances.store(identifier, instance)

    def _construct(
        self,
        identifier: ServiceIdentifier,
        registration: Registration | None,
        concrete: ServiceIdentifier | None,
    ) -> Any:
        if registration is not None:
            logger.debug("Resolving [%s] with its factory", identifier)
            return registration.factory(self)

        if concrete is not None:
            logger.debug("Resolving [%s] through binding to [%s]", identifier, concrete)
            return self.get(concrete)

        with self._introspection_errors(identifier):
            is_known = self._type_registry.knows(identifier)
        if is_known:
            logger.debug("Resolving [%s] by reflection", identifier)
            return self._autowire(identifier)

        raise SoloWireNotFoundError(identifier)

    def _autowire(self, identifier: ServiceIdentifier) -> Any:
        registry = self._type_registry
        with self._introspection_errors(identifier):
            if not registry.is_instantiable(identifier):
                raise SoloWireNotInstantiableError(identifier)
            parameters = registry.constructor_parameters(identifier)

        arguments = [self._resolve_parameter(identifier, parameter) for parameter in parameters]
        return registry.instantiate(identifier, arguments)

    def _resolve_parameter(
        self,
        identifier: ServiceIdentifier,
        parameter: ConstructorParameter,
    ) -> Any:
        if parameter.is_resolvable:
            return self.get(parameter.type_name)  # type: ignore[arg-type]
        if parameter.has_default:
            return parameter.default
        declaring_type = parameter.declaring_type or identifier
        raise SoloWireUnresolvableParameterError(identifier, parameter.name, declaring_type)

    # endregion Resolution Methods

    def _identify(self, key: ServiceKey) -> ServiceIdentifier:
        if isinstance(key, type) and self._type_registry.is_reflectable(key):
            return self._type_registry.register(key)
        return to_identifier(key)

    def _construction_guard(self, identifier: ServiceIdentifier) -> AbstractContextManager[Any]:
        if self._lock_mode is LockMode.THREAD:
            return self._instances.lock_for(identifier)
        return nullcontext()

    @staticmethod
    @contextmanager
    def _introspection_errors(identifier: ServiceIdentifier) -> Iterator[None]:
        try:
            yield
        except SoloWireError:
            raise
        except Exception as e:
            raise SoloWireTypeIntrospectionError(identifier, e) from e
