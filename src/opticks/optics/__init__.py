"""Optic variants: getters, setters, lenses, traversals and collect."""

from opticks.optics.collect import Collected, collect
from opticks.optics.getter import Getter, function, getter
from opticks.optics.lens import Lens, alter, attr, fields_of, identity_lens, index, lens
from opticks.optics.setter import Setter, setter
from opticks.optics.steps import as_optic
from opticks.optics.traversal import Traversal, filtered, traversal, values

__all__ = [
    "Getter",
    "getter",
    "function",
    "Setter",
    "setter",
    "Lens",
    "lens",
    "identity_lens",
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
    "as_optic",
]
