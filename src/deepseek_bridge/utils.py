"""Small helpers shared by the mappers."""

from __future__ import annotations

from typing import Any, MutableMapping, TypeVar

M = TypeVar("M", bound=MutableMapping[str, Any])


def remove_empty_keys(obj: M) -> M:
    """Delete keys whose value is None, in place, and return the same object.

    Falsy values such as ``0``, ``False`` and ``""`` are kept; ``temperature=0``
    is a real setting.
    """
    for key in [k for k, v in obj.items() if v is None]:
        del obj[key]
    return obj
