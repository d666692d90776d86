"""Deep read-only copies of raw document values."""

from __future__ import annotations

from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any


def freeze_value(value: Any) -> Any:
    """Return a read-only copy of value that shares no mutable state with it.

    Mappings become mapping proxies over fresh dicts, lists and tuples become
    tuples and sets become frozensets. Scalars are returned unchanged.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_value(child) for key, child in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze_value(child) for child in value)
    if isinstance(value, Set):
        return frozenset(value)
    return value
