"""Optic value object and the composition engine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, cast

from opticks.kernel.errors import OpticComposeError, UnavailableOpticOperationError

logger = logging.getLogger(__name__)

Capability = Literal["read", "write"]

Read = Callable[[Any], Any]
Update = Callable[[Any], Any]
Write = Callable[[Update, Any], Any]


@dataclass(frozen=True, eq=False, repr=False)
class Optic:
    """A composable accessor over nested immutable data.

    Attributes:
        _read: ``subject -> focus``. For multi-focus optics the focus is a
            list of foci. ``None`` when the optic cannot read.
        _write: ``(update, subject) -> subject'``. Applies ``update`` to the
            focus (or to each focus) and returns a new subject without
            mutating the old one. ``None`` when the optic cannot write.
        label: Human-readable description used in reprs and errors.
        multi: Whether the focus is multi-valued.
    """

    _read: Read | None = None
    _write: Write | None = None
    label: str = "optic"
    multi: bool = False

    @property
    def capabilities(self) -> frozenset[Capability]:
        caps: set[Capability] = set()
        if self._read is not None:
            caps.add("read")
        if self._write is not None:
            caps.add("write")
        return frozenset(caps)

    @property
    def readable(self) -> bool:
        return "read" in self.capabilities

    @property
    def writable(self) -> bool:
        return "write" in self.capabilities

    @property
    def as_getter(self) -> Read:
        """The read function ``subject -> focus``."""
        self.require("read", "as_getter")
        return cast(Read, self._read)

    @property
    def as_setter(self) -> Write:
        """The update function ``(update, subject) -> subject'``."""
        self.require("write", "as_setter")
        return cast(Write, self._write)

    def missing(self, capability: Capability) -> tuple[Optic, str | None, Capability] | None:
        """Locate what stops this optic from providing ``capability``.

        Returns:
            ``(optic, field, lacking)`` naming the innermost optic without the
            capability it lacks, or None when ``capability`` is available.
        """
        if capability in self.capabilities:
            return None
        return self, None, capability

    def require(self, capability: Capability, operation: str) -> None:
        """Raise UnavailableOpticOperationError unless ``capability`` is available."""
        found = self.missing(capability)
        if found is None:
            return
        offender, field, lacking = found
        logger.debug("Refusing %s on %s: %s lacks %s", operation, self.label, offender.label, lacking)
        raise UnavailableOpticOperationError(operation, lacking, offender, field=field)

    def __rshift__(self, other: Optic) -> Composite:
        if not isinstance(other, Optic):
            return NotImplemented
        return compose_optics(self, other)

    def __repr__(self) -> str:
        return self.label


@dataclass(frozen=True, eq=False, repr=False)
class Composite(Optic):
    """Optic folded from a chain of steps, outermost first."""

    steps: tuple[Optic, ...] = ()

    def missing(self, capability: Capability) -> tuple[Optic, str | None, Capability] | None:
        if capability in self.capabilities:
            return None
        for step in self.steps:
            found = step.missing(capability)
            if found is not None:
                return found
        return self, None, capability


def compose_optics(left: Optic, right: Optic) -> Composite:
    """Compose two optics, ``left`` being the outer one.

    The composite's capabilities are the intersection of both sides.

    Raises:
        OpticComposeError: When the intersection is empty. The error names
            the step of ``left`` nearest to ``right`` that shares no
            capability with it.
    """
    caps = left.capabilities & right.capabilities
    if not caps:
        culprit = next(
            (step for step in reversed(_steps(left)) if not step.capabilities & right.capabilities),
            _steps(left)[-1],
        )
        logger.debug("Cannot compose %s with %s", culprit.label, right.label)
        raise OpticComposeError(culprit, right)

    steps = _steps(left) + _steps(right)
    composite = Composite(
        _read=_compose_read(left, right) if "read" in caps else None,
        _write=_compose_write(left, right) if "write" in caps else None,
        label="optic(" + ", ".join(step.label for step in steps) + ")",
        multi=left.multi or right.multi,
        steps=steps,
    )
    logger.debug("Composed %s with capabilities %s", composite.label, sorted(caps))
    return composite


def _steps(optic: Optic) -> tuple[Optic, ...]:
    if isinstance(optic, Composite):
        return optic.steps
    return (optic,)


def _compose_read(left: Optic, right: Optic) -> Read:
    outer, inner = cast(Read, left._read), cast(Read, right._read)

    if not left.multi:
        def read(subject: Any) -> Any:
            return inner(outer(subject))
    elif not right.multi:
        def read(subject: Any) -> Any:
            return [inner(focus) for focus in outer(subject)]
    else:
        def read(subject: Any) -> Any:
            return [leaf for focus in outer(subject) for leaf in inner(focus)]

    return read


def _compose_write(left: Optic, right: Optic) -> Write:
    outer, inner = cast(Write, left._write), cast(Write, right._write)

    def write(update: Update, subject: Any) -> Any:
        return outer(lambda focus: inner(update, focus), subject)

    return write
