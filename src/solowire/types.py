from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from solowire.container_interface import IContainer


class Lifetime(str, Enum):
    """Defines how long a factory-produced value lives in the container."""

    SINGLETON = "singleton"
    """The factory runs once and its result is cached for the container's lifetime."""

    TRANSIENT = "transient"
    """The factory runs on every lookup and its result is never cached."""


Factory: TypeAlias = Callable[["IContainer"], Any]
"""A type alias for factories: called with the container, returns the service."""
