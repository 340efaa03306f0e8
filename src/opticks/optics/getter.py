"""Read-only optics."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from opticks.kernel.optic import Optic


class Getter(Optic):
    """Optic exposing only ``as_getter``."""


def getter(fn: Callable[[Any], Any], label: str | None = None) -> Getter:
    """Create a read-only optic from a projection ``subject -> focus``."""
    return Getter(_read=fn, label=label or f"getter({_name(fn)})")


def function(fn: Callable[[Any], Any]) -> Getter:
    """Adapt a plain function appearing in a chain.

    A bare transform has no inverse, so the resulting step is read-only.
    """
    return Getter(_read=fn, label=_name(fn))


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", None) or type(fn).__name__
