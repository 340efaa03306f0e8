"""Record-shaped combinator over several optics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from opticks.kernel.functions import constant
from opticks.kernel.optic import Capability, Optic, Update
from opticks.optics.steps import Step, as_optic


@dataclass(frozen=True, eq=False, repr=False)
class Collected(Optic):
    """Optic whose focus is a record of other optics' foci over one subject.

    Attributes:
        fields: Field name to the optic read and written for that field.
    """

    fields: Mapping[str, Optic] = field(default_factory=dict)

    def missing(self, capability: Capability) -> tuple[Optic, str | None, Capability] | None:
        if capability in self.capabilities:
            return None
        # Writing needs every field readable too, to build the current record.
        needed: tuple[Capability, ...] = ("read", "write") if capability == "write" else ("read",)
        for need in needed:
            for name, sub in self.fields.items():
                found = sub.missing(need)
                if found is not None:
                    offender, _, lacking = found
                    return offender, name, lacking
        return self, None, capability


def collect(mapping: Mapping[str, Step]) -> Collected:
    """Bundle named optics into one optic focused on a record.

    Every field reads and writes against the same subject. Reading gives
    ``{name: view(field, subject)}``. Writing applies the update to that
    record, then writes each field of the new record back through its own
    optic, one after another starting from the original subject. Fields
    absent from the new record are left untouched. A multi-focus field must
    get back a list with one item per focus, else ValueError is raised.

    Readable when every field is readable; writable when every field is
    both readable and writable.
    """
    optics = {name: as_optic(step) for name, step in mapping.items()}
    readable = all(sub.readable for sub in optics.values())
    writable = readable and all(sub.writable for sub in optics.values())

    def read(subject: Any) -> dict[str, Any]:
        return {name: sub.as_getter(subject) for name, sub in optics.items()}

    def write(update: Update, subject: Any) -> Any:
        current = read(subject)
        counts = {name: len(current[name]) for name, sub in optics.items() if sub.multi}
        record = update(current)
        result = subject
        for name, sub in optics.items():
            if name in record:
                result = sub.as_setter(_replacement(name, sub, record[name], counts.get(name, 0)), result)
        return result

    return Collected(
        _read=read if readable else None,
        _write=write if writable else None,
        label="collect(" + ", ".join(f"{name}={sub.label}" for name, sub in optics.items()) + ")",
        fields=optics,
    )


def _replacement(name: str, sub: Optic, value: Any, count: int) -> Update:
    if not sub.multi:
        return constant(value)
    # Multi-focus fields take their new foci in order, one per existing focus.
    value = list(value)
    if len(value) != count:
        raise ValueError(
            f"Field '{name}' of collect has {count} foci but the updated record gives {len(value)}"
        )
    foci = iter(value)
    return lambda _: next(foci)
