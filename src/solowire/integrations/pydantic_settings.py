from __future__ import annotations

from typing import Any

from solowire.type_checks import is_runtime_class

try:
    from pydantic_settings import BaseSettings
except ImportError:  # pragma: no cover - exercised only without the extra
    SETTINGS_BASES: tuple[type[Any], ...] = ()
else:
    SETTINGS_BASES = (BaseSettings,)


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether ``candidate`` is a pydantic-settings model.

    Settings models read their fields from the environment, so the type
    registry builds them with no arguments instead of autowiring each field.
    Always ``False`` when the ``pydantic-settings`` extra is not installed.
    """
    if not SETTINGS_BASES or not is_runtime_class(candidate):
        return False
    return issubclass(candidate, SETTINGS_BASES)


__all__ = ["SETTINGS_BASES", "is_pydantic_settings_subclass"]
