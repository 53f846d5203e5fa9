from __future__ import annotations

import dataclasses
import importlib
import inspect
import threading
import types
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, Union, get_args, get_origin, get_type_hints, runtime_checkable

from solowire.defaults import DEFAULT_BUILTIN_TYPES, DEFAULT_VALUE_BASE_TYPES
from solowire.exceptions import SoloWireNotFoundError, SoloWireTypeIntrospectionError
from solowire.integrations.pydantic_settings import is_pydantic_settings_subclass
from solowire.service_identifier import ServiceIdentifier, identifier_of_type
from solowire.type_checks import is_abstract_class, is_runtime_class

_SKIPPED_PARAMETER_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    """Information about a constructor parameter."""

    name: str
    type_name: ServiceIdentifier | None
    """Identifier of the annotated class, ``None`` when untyped or not a plain class."""
    is_builtin: bool = False
    has_default: bool = False
    default: Any = None
    positional_only: bool = False
    declaring_type: ServiceIdentifier | None = None
    """Identifier of the class whose constructor declares the parameter."""

    @property
    def is_resolvable(self) -> bool:
        """Whether the container should resolve this parameter by its type."""
        return self.type_name is not None and not self.is_builtin


@runtime_checkable
class TypeRegistry(Protocol):
    """Capability the container uses to construct types it has no factory for.

    Implementations answer questions about type names and build instances;
    the container never touches classes directly.
    """

    def knows(self, type_name: ServiceIdentifier) -> bool:
        """Return whether ``type_name`` names a reflectable type."""
        ...

    def is_reflectable(self, candidate: object) -> bool:
        """Return whether ``candidate`` is a class this registry can describe."""
        ...

    def register(self, cls: type[Any], name: ServiceIdentifier | None = None) -> ServiceIdentifier:
        """Record ``cls`` under ``name`` (its qualified name by default) and return the name."""
        ...

    def is_instantiable(self, type_name: ServiceIdentifier) -> bool:
        """Return whether the named type can be instantiated directly."""
        ...

    def constructor_parameters(
        self,
        type_name: ServiceIdentifier,
    ) -> tuple[ConstructorParameter, ...]:
        """Return constructor parameters in declaration order."""
        ...

    def instantiate(self, type_name: ServiceIdentifier, args: Sequence[Any]) -> Any:
        """Build the named type from arguments aligned with its constructor parameters."""
        ...


class ReflectiveTypeRegistry:
    """Type registry backed by ``inspect`` and ``typing.get_type_hints``.

    Classes are known once registered explicitly, once discovered as a
    constructor annotation, or, when ``import_types`` is enabled, when a
    dotted identifier such as ``"myapp.services.Mailer"`` imports to a class.

    Built-in types and common value types (dates, paths, UUIDs, decimals) are
    never reflectable: they are configuration, not services.
    """

    def __init__(
        self,
        *,
        import_types: bool = True,
        builtin_types: Collection[type[Any]] = DEFAULT_BUILTIN_TYPES,
        value_base_types: tuple[type[Any], ...] = DEFAULT_VALUE_BASE_TYPES,
    ) -> None:
        """Initialize the registry.

        Args:
            import_types: Allow unknown dotted identifiers to be imported with
                ``importlib`` when looked up.
            builtin_types: Types treated as primitives in addition to everything
                defined in the ``builtins`` module.
            value_base_types: Base classes whose subclasses are treated as
                primitives.

        """
        self._import_types = import_types
        self._builtin_types = frozenset(builtin_types)
        self._value_base_types = value_base_types

        self._types: dict[ServiceIdentifier, type[Any]] = {}
        self._types_lock = threading.Lock()
        self._parameters_cache: dict[ServiceIdentifier, tuple[ConstructorParameter, ...]] = {}

    def knows(self, type_name: ServiceIdentifier) -> bool:
        return self._lookup_type(type_name) is not None

    def is_reflectable(self, candidate: object) -> bool:
        if not is_runtime_class(candidate):
            return False
        if self.is_builtin(candidate):
            return False
        return not issubclass(candidate, type)

    def is_builtin(self, cls: type[Any]) -> bool:
        """Return whether ``cls`` is a primitive that is never autowired."""
        if cls.__module__ == "builtins" or cls in self._builtin_types:
            return True
        return issubclass(cls, self._value_base_types)

    def register(self, cls: type[Any], name: ServiceIdentifier | None = None) -> ServiceIdentifier:
        if not self.is_reflectable(cls):
            msg = f"Only non built-in classes can be registered, got {cls!r}."
            raise TypeError(msg)

        type_name = name or identifier_of_type(cls)
        if self._types.get(type_name) is not cls:
            with self._types_lock:
                self._types[type_name] = cls
                self._parameters_cache.pop(type_name, None)
        return type_name

    def is_instantiable(self, type_name: ServiceIdentifier) -> bool:
        return not is_abstract_class(self._require_type(type_name))

    def constructor_parameters(
        self,
        type_name: ServiceIdentifier,
    ) -> tuple[ConstructorParameter, ...]:
        cached = self._parameters_cache.get(type_name)
        if cached is not None:
            return cached

        cls = self._require_type(type_name)
        parameters = self._extract_parameters(type_name, cls)
        self._parameters_cache[type_name] = parameters
        return parameters

    def instantiate(self, type_name: ServiceIdentifier, args: Sequence[Any]) -> Any:
        cls = self._require_type(type_name)
        parameters = self.constructor_parameters(type_name)
        if len(args) != len(parameters):
            msg = (
                f"Class [{type_name}] expects {len(parameters)} constructor arguments, "
                f"got {len(args)}."
            )
            raise ValueError(msg)

        positional: list[Any] = []
        keywords: dict[str, Any] = {}
        for parameter, value in zip(parameters, args):
            if parameter.positional_only:
                positional.append(value)
            else:
                keywords[parameter.name] = value
        return cls(*positional, **keywords)

    def _extract_parameters(
        self,
        type_name: ServiceIdentifier,
        cls: type[Any],
    ) -> tuple[ConstructorParameter, ...]:
        # Settings models load themselves from the environment
        if is_pydantic_settings_subclass(cls):
            return ()
        if cls.__init__ is object.__init__ and cls.__new__ is object.__new__:
            return ()

        # Dataclass fields carry the annotations of the generated __init__
        if dataclasses.is_dataclass(cls):
            hints_source: Any = cls
        elif cls.__init__ is not object.__init__:
            hints_source = cls.__init__
        else:
            hints_source = cls.__new__
        try:
            signature = inspect.signature(cls)
            type_hints = get_type_hints(hints_source)
        except (TypeError, ValueError, NameError) as e:
            raise SoloWireTypeIntrospectionError(type_name, e) from e

        declaring_type = identifier_of_type(cls)
        return tuple(
            self._describe_parameter(parameter, type_hints.get(parameter.name), declaring_type)
            for parameter in signature.parameters.values()
            if parameter.kind not in _SKIPPED_PARAMETER_KINDS
        )

    def _describe_parameter(
        self,
        parameter: inspect.Parameter,
        hint: Any,
        declaring_type: ServiceIdentifier,
    ) -> ConstructorParameter:
        type_name: ServiceIdentifier | None = None
        is_builtin = False
        hint = _strip_optional(hint)
        if is_runtime_class(hint):
            is_builtin = not self.is_reflectable(hint)
            type_name = identifier_of_type(hint) if is_builtin else self.register(hint)

        has_default = parameter.default is not inspect.Parameter.empty
        return ConstructorParameter(
            name=parameter.name,
            type_name=type_name,
            is_builtin=is_builtin,
            has_default=has_default,
            default=parameter.default if has_default else None,
            positional_only=parameter.kind is inspect.Parameter.POSITIONAL_ONLY,
            declaring_type=declaring_type,
        )

    def _require_type(self, type_name: ServiceIdentifier) -> type[Any]:
        cls = self._lookup_type(type_name)
        if cls is None:
            raise SoloWireNotFoundError(type_name)
        return cls

    def _lookup_type(self, type_name: ServiceIdentifier) -> type[Any] | None:
        cls = self._types.get(type_name)
        if cls is not None or not self._import_types:
            return cls

        cls = self._import_type(type_name)
        if cls is None or not self.is_reflectable(cls):
            return None
        self.register(cls, type_name)
        return cls

    def _import_type(self, type_name: ServiceIdentifier) -> Any:
        parts = type_name.split(".")
        # Relative or malformed names such as "..config" never name a module
        if not all(part.isidentifier() for part in parts):
            return None
        # Longest importable module prefix first, the rest is an attribute path
        for split_at in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split_at])
            try:
                target: Any = importlib.import_module(module_name)
            except (ImportError, ValueError, TypeError):
                continue
            for attribute in parts[split_at:]:
                target = getattr(target, attribute, None)
                if target is None:
                    return None
            return target
        return None


def _strip_optional(hint: Any) -> Any:
    """Return ``X`` for ``X | None`` and ``Optional[X]``, otherwise ``hint`` unchanged."""
    if get_origin(hint) not in (Union, types.UnionType):
        return hint
    members = get_args(hint)
    non_none = [member for member in members if member is not type(None)]
    if len(non_none) == 1 and len(non_none) < len(members):
        return non_none[0]
    return hint


__all__ = ["ConstructorParameter", "ReflectiveTypeRegistry", "TypeRegistry"]
