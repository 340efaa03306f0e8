"""Error types raised by optic composition and optic verbs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from opticks.kernel.optic import Capability, Optic


class OpticError(Exception):
    """Base class for every error raised by opticks."""


class OpticComposeError(OpticError):
    """Error raised when two adjacent steps of a chain cannot be joined.

    Detected at construction time from the capability sets alone: the
    composite would expose neither read nor write capability.
    """

    def __init__(self, left: Optic, right: Optic) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compose {left.label} {_caps(left)} with "
            f"{right.label} {_caps(right)}: no capability left for any operation"
        )

    def __repr__(self) -> str:
        return f"OpticComposeError(left={self.left!r}, right={self.right!r})"


class UnavailableOpticOperationError(OpticError):
    """Error raised when an operation needs a capability the optic lacks.

    ``optic`` is the innermost offender: the chain step, or the collected
    field (named by ``field``), that is missing ``capability``.
    """

    def __init__(
        self,
        operation: str,
        capability: Capability,
        optic: Optic,
        field: str | None = None,
    ) -> None:
        self.operation = operation
        self.capability = capability
        self.optic = optic
        self.field = field
        where = f" (field '{field}')" if field is not None else ""
        super().__init__(
            f"'{operation}' requires {capability} capability, "
            f"which {optic.label}{where} does not provide"
        )

    def __repr__(self) -> str:
        return (
            f"UnavailableOpticOperationError(operation={self.operation!r}, "
            f"capability={self.capability!r}, optic={self.optic!r}, field={self.field!r})"
        )


def _caps(optic: Optic) -> str:
    return "{" + ", ".join(sorted(optic.capabilities)) + "}"
