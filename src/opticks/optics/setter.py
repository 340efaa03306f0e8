"""Write-only optics."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from opticks.kernel.functions import constant
from opticks.kernel.optic import Optic, Update


class Setter(Optic):
    """Optic exposing only ``as_setter``."""

    def set(self, value: Any, subject: Any) -> Any:
        """Replace the focus of ``subject`` with ``value``."""
        return self.as_setter(constant(value), subject)


def setter(over: Callable[[Update, Any], Any], label: str | None = None) -> Setter:
    """Create a write-only optic from ``(update, subject) -> subject'``."""
    name = getattr(over, "__name__", None) or type(over).__name__
    return Setter(_write=over, label=label or f"setter({name})")
