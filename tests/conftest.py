"""Shared pytest fixtures for solowire tests."""

import pytest

from solowire.container import Container
from solowire.lock_mode import LockMode
from solowire.type_registry import ReflectiveTypeRegistry


@pytest.fixture()
def container() -> Container:
    """Default container: thread locks, dotted identifiers importable."""
    return Container()


@pytest.fixture()
def container_no_locks() -> Container:
    """Container with lock_mode=LockMode.NONE."""
    return Container(lock_mode=LockMode.NONE)


@pytest.fixture()
def container_no_imports() -> Container:
    """Container whose type registry never imports dotted identifiers."""
    return Container(type_registry=ReflectiveTypeRegistry(import_types=False))


@pytest.fixture()
def type_registry() -> ReflectiveTypeRegistry:
    """ReflectiveTypeRegistry instance."""
    return ReflectiveTypeRegistry()
