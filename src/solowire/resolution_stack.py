from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from solowire.exceptions import SoloWireCircularDependencyError
from solowire.service_identifier import ServiceIdentifier

# Identifiers currently under construction in this thread / async task.
# Tuples keep each context's view immutable, so copied contexts never share a stack.
_resolution_stack: ContextVar[tuple[ServiceIdentifier, ...]] = ContextVar(
    "solowire_resolution_stack",
    default=(),
)


def current_resolution_path() -> tuple[ServiceIdentifier, ...]:
    """Return the identifiers being resolved, outermost first."""
    return _resolution_stack.get()


@contextmanager
def resolving(identifier: ServiceIdentifier) -> Iterator[None]:
    """Mark ``identifier`` as in progress for the duration of the block.

    Raises:
        SoloWireCircularDependencyError: If ``identifier`` is already in progress
            in the current context.

    """
    stack = _resolution_stack.get()
    if identifier in stack:
        raise SoloWireCircularDependencyError(identifier, stack)

    token = _resolution_stack.set((*stack, identifier))
    try:
        yield
    finally:
        _resolution_stack.reset(token)
