"""Deep read-only views of parsed JSON values.

freeze() turns objects into MappingProxyType and arrays into tuples at
every depth; thaw() is the inverse, producing fresh mutable copies.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def freeze(value: object) -> object:
    """Return a read-only copy of value, nested containers included."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value


def freeze_mapping(value: Mapping[str, object]) -> Mapping[str, object]:
    """freeze() for a top-level object."""
    return MappingProxyType({key: freeze(item) for key, item in value.items()})


def thaw(value: object) -> object:
    """Return a mutable deep copy of value (dicts and lists)."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value
