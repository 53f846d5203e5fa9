import datetime
import decimal
import pathlib
import uuid
from typing import Any

from solowire.lock_mode import LockMode
from solowire.types import Lifetime

DEFAULT_BUILTIN_TYPES: frozenset[type[Any]] = frozenset(
    {
        int,
        str,
        float,
        bool,
        bytes,
        complex,
        list,
        dict,
        set,
        frozenset,
        tuple,
        object,
        type,
    },
)
"""Types never resolved through the container, even when annotated on a constructor."""

DEFAULT_VALUE_BASE_TYPES: tuple[type[Any], ...] = (
    pathlib.PurePath,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    decimal.Decimal,
)
"""Value types treated like built-ins: they (and their subclasses) are never autowired."""

DEFAULT_LIFETIME = Lifetime.SINGLETON

DEFAULT_LOCK_MODE = LockMode.THREAD
