"""Bidirectional single-focus optics."""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable, Mapping, MutableMapping
from dataclasses import fields, is_dataclass, replace
from typing import Any

from pydantic import BaseModel

from opticks.kernel.functions import identity
from opticks.kernel.optic import Optic, Update
from opticks.optics.containers import is_sequence, rebuild_sequence, replace_item


class Lens(Optic):
    """Optic exposing both ``as_getter`` and ``as_setter`` on a single focus."""


def lens(
    get: Callable[[Any], Any],
    set: Callable[[Any, Any], Any],
    label: str | None = None,
) -> Lens:
    """Create a lens from a getter ``s -> a`` and a setter ``(s, a) -> s``."""

    def write(update: Update, subject: Any) -> Any:
        return set(subject, update(get(subject)))

    return Lens(_read=get, _write=write, label=label or "lens")


def identity_lens() -> Lens:
    """Lens whose focus is the whole subject."""

    def write(update: Update, subject: Any) -> Any:
        return update(subject)

    return Lens(_read=identity, _write=write, label="identity")


def alter(key: Hashable, default_factory: Callable[[], MutableMapping[Any, Any]] = dict) -> Lens:
    """Lens on ``subject[key]`` that creates the key on write.

    Reading an absent key, or reading from ``None``, gives ``None``. Writing
    returns a shallow copy of the subject with ``key`` set; when the subject
    is ``None`` (or not a container at all) a fresh ``default_factory()``
    record is built instead, which is how deep ``set`` calls create missing
    intermediate records. Integer keys on sequences behave like ``index``.

    An absent key is written even when the update leaves its ``None`` value
    unchanged: ``over(alter("k"), identity, {})`` gives ``{"k": None}``.

    Args:
        key: Key to focus on
        default_factory: Builds the record used when there is none to copy

    Returns:
        The lens
    """

    def read(subject: Any) -> Any:
        if isinstance(key, int) and is_sequence(subject):
            return _read_index(key, subject)
        if isinstance(subject, Mapping):
            return subject.get(key)
        return None

    def write(update: Update, subject: Any) -> Any:
        if isinstance(key, int) and is_sequence(subject):
            return _write_index(key, update, subject)
        if isinstance(subject, Mapping):
            return replace_item(subject, key, update(subject.get(key)))
        record = default_factory()
        record[key] = update(None)
        return record

    return Lens(_read=read, _write=write, label=f"alter({key!r})")


def index(i: int) -> Lens:
    """Lens on the ``i``-th element of a list or tuple.

    Out-of-range reads give ``None``. Writing past the end pads the new
    sequence with ``None``; writing into ``None`` starts from an empty list.
    """

    def read(subject: Any) -> Any:
        if not is_sequence(subject):
            return None
        return _read_index(i, subject)

    def write(update: Update, subject: Any) -> Any:
        if not is_sequence(subject):
            subject = []
        return _write_index(i, update, subject)

    return Lens(_read=read, _write=write, label=f"index({i})")


def attr(name: str) -> Lens:
    """Lens on an attribute of a dataclass, pydantic model or plain object.

    Dataclasses are rebuilt with ``dataclasses.replace``, pydantic models with
    ``model_copy``, anything else is shallow-copied and the attribute set on
    the copy. Writing into ``None`` leaves it ``None``.
    """

    def read(subject: Any) -> Any:
        return getattr(subject, name, None)

    def write(update: Update, subject: Any) -> Any:
        if subject is None:
            return None
        value = update(getattr(subject, name, None))
        if is_dataclass(subject) and not isinstance(subject, type):
            return replace(subject, **{name: value})
        if isinstance(subject, BaseModel):
            return subject.model_copy(update={name: value})
        new = copy.copy(subject)
        setattr(new, name, value)
        return new

    return Lens(_read=read, _write=write, label=f"attr({name!r})")


def fields_of(cls: type) -> dict[str, Lens]:
    """Derive an ``attr`` lens for every field of a dataclass or pydantic model."""
    if is_dataclass(cls):
        names = [f.name for f in fields(cls)]
    elif isinstance(cls, type) and issubclass(cls, BaseModel):
        names = list(cls.model_fields)
    else:
        raise TypeError(f"Cannot derive lenses for {cls!r}: not a dataclass or pydantic model")
    return {name: attr(name) for name in names}


def _read_index(i: int, sequence: Any) -> Any:
    try:
        return sequence[i]
    except IndexError:
        return None


def _write_index(i: int, update: Update, sequence: Any) -> Any:
    items = list(sequence)
    if -len(items) <= i < len(items):
        items[i] = update(items[i])
    elif i >= 0:
        items.extend([None] * (i - len(items)))
        items.append(update(None))
    else:
        return sequence
    return rebuild_sequence(sequence, items)
