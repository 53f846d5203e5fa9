from solowire.container import Container
from solowire.container_interface import IContainer
from solowire.exceptions import (
    SoloWireCircularDependencyError,
    SoloWireError,
    SoloWireInvalidRegistrationError,
    SoloWireNotFoundError,
    SoloWireNotInstantiableError,
    SoloWireResolutionError,
    SoloWireTypeIntrospectionError,
    SoloWireUnresolvableParameterError,
)
from solowire.lock_mode import LockMode
from solowire.type_registry import ConstructorParameter, ReflectiveTypeRegistry, TypeRegistry
from solowire.types import Lifetime

__all__ = [
    "ConstructorParameter",
    "Container",
    "IContainer",
    "Lifetime",
    "LockMode",
    "ReflectiveTypeRegistry",
    "SoloWireCircularDependencyError",
    "SoloWireError",
    "SoloWireInvalidRegistrationError",
    "SoloWireNotFoundError",
    "SoloWireNotInstantiableError",
    "SoloWireResolutionError",
    "SoloWireTypeIntrospectionError",
    "SoloWireUnresolvableParameterError",
    "TypeRegistry",
]
