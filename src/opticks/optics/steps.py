"""Coercion of chain steps into optics."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from opticks.kernel.optic import Optic
from opticks.optics.getter import function
from opticks.optics.lens import alter

# Anything allowed in a chain: an optic, a plain function, or a key.
Step = Any


def as_optic(step: Step) -> Optic:
    """Coerce one chain step.

    Optics are used as they are, callables become read-only steps and any
    other hashable value is taken as a key for ``alter``.
    """
    if isinstance(step, Optic):
        return step
    if callable(step):
        return function(step)
    if isinstance(step, Hashable):
        return alter(step)
    raise TypeError(f"Cannot use {step!r} as an optic step")
