from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for cached resolution.

    Pass to ``Container(lock_mode=...)``. Keep ``THREAD`` when the container
    is shared between threads; choose ``NONE`` for single-threaded hosts that
    want to skip lock bookkeeping on first lookups.
    """

    THREAD = "thread"
    """Guard each identifier's first construction with a ``threading.Lock``."""

    NONE = "none"
    """Disable per-identifier locking around cache reads/writes."""
