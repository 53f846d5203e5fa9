from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SoloWireError(Exception):
    """Represent a base class for all solowire-specific failures.

    Catch this type when you want to handle any solowire error path without
    matching each concrete exception class individually.
    """


class SoloWireNotFoundError(SoloWireError):
    """Signal that an identifier names nothing the container can provide.

    Raised by ``Container.get`` when the identifier has no cached instance, no
    factory, no binding, and does not name a reflectable type.

    Typical fixes include registering a factory with ``Container.set``,
    binding the identifier with ``Container.bind``, or registering the class
    with ``Container.register_type``.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Service [{identifier}] not found in the container.")


class SoloWireResolutionError(SoloWireError):
    """Signal that a known identifier could not be constructed.

    Every subclass carries the failing ``identifier``. Catch this type to
    handle any misconfigured graph regardless of the concrete cause.
    """

    def __init__(self, identifier: str, message: str | None = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"Cannot resolve service [{identifier}].")


class SoloWireInvalidRegistrationError(SoloWireResolutionError):
    """Signal a factory registration that is not callable.

    Raised by ``Container.set`` and ``Container.set_multiple``. For bulk
    registration the first invalid entry in iteration order is reported;
    entries before it remain registered.
    """

    def __init__(self, identifier: str, factory: Any) -> None:
        self.factory = factory
        super().__init__(
            identifier,
            f"Service [{identifier}] must be a callable, got {type(factory).__name__}.",
        )


class SoloWireNotInstantiableError(SoloWireResolutionError):
    """Signal reflective construction of an abstract or protocol type.

    Typical fix is binding the abstract identifier to a concrete class with
    ``Container.bind`` or registering a factory for it.
    """

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, f"Class [{identifier}] is not instantiable.")


class SoloWireUnresolvableParameterError(SoloWireResolutionError):
    """Signal a constructor parameter with no resolvable type and no default.

    Raised when a parameter is untyped or typed with a built-in type and does
    not declare a default value.
    """

    def __init__(self, identifier: str, parameter_name: str, declaring_type: str) -> None:
        self.parameter_name = parameter_name
        self.declaring_type = declaring_type
        super().__init__(
            identifier,
            f"Cannot resolve dependency [{parameter_name}] for parameter "
            f"[{declaring_type}:{parameter_name}].",
        )


class SoloWireTypeIntrospectionError(SoloWireResolutionError):
    """Signal that a type's constructor metadata could not be read.

    Wraps failures from ``inspect.signature`` and ``typing.get_type_hints``,
    most often an unresolvable forward reference in a constructor annotation.
    The original exception is available as ``cause`` and ``__cause__``.
    """

    def __init__(self, identifier: str, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(identifier, f"Cannot resolve service [{identifier}]: {cause}")


class SoloWireCircularDependencyError(SoloWireResolutionError):
    """Signal that an identifier was requested again while being constructed.

    ``resolution_path`` lists the identifiers from the outermost ``get`` call
    down to the repeated one.
    """

    def __init__(self, identifier: str, resolution_path: Sequence[str]) -> None:
        self.resolution_path = [*resolution_path, identifier]
        chain = " -> ".join(self.resolution_path)
        super().__init__(identifier, f"Circular dependency detected: {chain}")
