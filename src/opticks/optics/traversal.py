"""Multi-focus optics."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from opticks.kernel.optic import Optic, Update
from opticks.optics.containers import is_sequence, rebuild_mapping, rebuild_sequence


class Traversal(Optic):
    """Optic targeting zero or more foci inside a container.

    ``as_getter`` returns the foci as a list in container order and
    ``as_setter`` updates each focus independently, rebuilding a container
    of the same shape.
    """


def traversal(
    enumerate: Callable[[Any], Iterable[Any]],
    rebuild: Callable[[Any, list[Any]], Any],
    label: str | None = None,
) -> Traversal:
    """Create a traversal.

    Args:
        enumerate: Yields the foci of a subject in order
        rebuild: ``(subject, new_foci) -> new subject``, same order and length
        label: Optional description

    Returns:
        The traversal. ``None`` subjects read as ``[]`` and are written back
        unchanged.
    """

    def read(subject: Any) -> list[Any]:
        if subject is None:
            return []
        return list(enumerate(subject))

    def write(update: Update, subject: Any) -> Any:
        if subject is None:
            return None
        return rebuild(subject, [update(focus) for focus in enumerate(subject)])

    return Traversal(_read=read, _write=write, label=label or "traversal", multi=True)


def _elements(subject: Any) -> list[Any]:
    if isinstance(subject, Mapping):
        return list(subject.values())
    if is_sequence(subject):
        return list(subject)
    return []


def _rebuild(subject: Any, foci: list[Any]) -> Any:
    if isinstance(subject, Mapping):
        return rebuild_mapping(subject, foci)
    if is_sequence(subject):
        return rebuild_sequence(subject, foci)
    return subject


values = traversal(_elements, _rebuild, label="values")


def filtered(predicate: Callable[[Any], bool]) -> Traversal:
    """Traversal over the elements (or mapping values) matching ``predicate``.

    Elements that do not match are kept as they are on write.
    """

    def read(subject: Any) -> list[Any]:
        return [item for item in _elements(subject) if predicate(item)]

    def write(update: Update, subject: Any) -> Any:
        items = _elements(subject)
        if not items:
            return subject
        return _rebuild(subject, [update(item) if predicate(item) else item for item in items])

    name = getattr(predicate, "__name__", None) or type(predicate).__name__
    return Traversal(_read=read, _write=write, label=f"filtered({name})", multi=True)
