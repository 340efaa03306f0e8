"""Shallow-copy helpers for rebuilding containers after an update."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from typing import Any


def is_sequence(value: Any) -> bool:
    """True for list-like containers; strings and bytes are scalars here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def rebuild_sequence(original: Sequence[Any], items: Iterable[Any]) -> Sequence[Any]:
    """Build a new sequence of the same type as ``original`` holding ``items``."""
    if isinstance(original, tuple):
        if hasattr(original, "_fields"):
            return type(original)(*items)
        return tuple(items)
    if isinstance(original, list):
        return type(original)(items)
    return list(items)


def replace_item(original: Mapping[Any, Any], key: Any, value: Any) -> Mapping[Any, Any]:
    """Shallow copy of ``original`` with ``key`` set to ``value``."""
    if isinstance(original, MutableMapping):
        new = copy.copy(original)
        new[key] = value
        return new
    return {**original, key: value}


def rebuild_mapping(original: Mapping[Any, Any], values: Iterable[Any]) -> Mapping[Any, Any]:
    """New mapping with the keys of ``original`` (in order) paired with ``values``."""
    pairs = zip(original.keys(), values)
    if isinstance(original, MutableMapping):
        new = copy.copy(original)
        for key, value in pairs:
            new[key] = value
        return new
    return dict(pairs)
