"""opticks - composable immutable accessors for nested data."""

from .kernel import (
    Capability,
    Composite,
    Optic,
    OpticComposeError,
    OpticError,
    UnavailableOpticOperationError,
    compose,
    constant,
    curry,
    identity,
    pipe,
)
from .operations import optic, over, path, set_, to_list, view
from .optics import (
    Collected,
    Getter,
    Lens,
    Setter,
    Traversal,
    alter,
    attr,
    collect,
    fields_of,
    filtered,
    getter,
    index,
    lens,
    setter,
    traversal,
    values,
)

__all__ = [
    # Verbs
    "optic",
    "path",
    "view",
    "set_",
    "over",
    "to_list",
    # Optics
    "Optic",
    "Composite",
    "Capability",
    "Getter",
    "getter",
    "Setter",
    "setter",
    "Lens",
    "lens",
    "alter",
    "index",
    "attr",
    "fields_of",
    "Traversal",
    "traversal",
    "values",
    "filtered",
    "Collected",
    "collect",
    # Errors
    "OpticError",
    "OpticComposeError",
    "UnavailableOpticOperationError",
    # Functions
    "curry",
    "compose",
    "pipe",
    "identity",
    "constant",
]
