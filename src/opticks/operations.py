"""Public verbs over optic chains.

Every verb is curried: ``view(lens)`` and ``set_(lens, value)`` return
functions waiting for the subject. Verbs accept an optic or anything
``optic`` accepts as a single step, and never mutate the subject.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from functools import reduce
from typing import Any

from opticks.kernel.functions import constant, curry
from opticks.kernel.optic import Optic, compose_optics
from opticks.optics.lens import alter, identity_lens
from opticks.optics.steps import Step, as_optic


def optic(*steps: Step) -> Optic:
    """Build one optic from a chain of steps, outermost first.

    Steps may be optics, plain functions (read-only transforms) or keys
    (shorthand for ``alter(key)``). The result's capabilities are the
    intersection of the steps' capabilities.

    Raises:
        OpticComposeError: When two adjacent steps leave no capability.
    """
    optics = [as_optic(step) for step in steps]
    if not optics:
        return identity_lens()
    if len(optics) == 1:
        return optics[0]
    return reduce(compose_optics, optics)


def path(keys: Iterable[Hashable]) -> Optic:
    """Lens through nested records, creating missing ones on write."""
    return optic(*[alter(key) for key in keys])


@curry
def view(o: Step, subject: Any) -> Any:
    """Read the focus (a list of foci for multi-focus optics)."""
    o = as_optic(o)
    o.require("read", "view")
    return o.as_getter(subject)


@curry
def to_list(o: Step, subject: Any) -> list[Any]:
    """Read the foci as a list; a single-focus optic gives a one-item list."""
    o = as_optic(o)
    o.require("read", "to_list")
    focus = o.as_getter(subject)
    if o.multi:
        return list(focus)
    return [focus]


@curry
def over(o: Step, update: Callable[[Any], Any], subject: Any) -> Any:
    """Apply ``update`` to the focus (or each focus) and return a new subject."""
    o = as_optic(o)
    o.require("write", "over")
    return o.as_setter(update, subject)


@curry
def set_(o: Step, value: Any, subject: Any) -> Any:
    """Replace the focus (or each focus) with ``value``."""
    o = as_optic(o)
    o.require("write", "set")
    return o.as_setter(constant(value), subject)
