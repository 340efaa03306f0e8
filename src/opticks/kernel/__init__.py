"""Kernel layer - optic value object, composition and errors."""

from opticks.kernel.errors import OpticComposeError, OpticError, UnavailableOpticOperationError
from opticks.kernel.functions import compose, constant, curry, identity, pipe
from opticks.kernel.optic import Capability, Composite, Optic, compose_optics

__all__ = [
    "Optic",
    "Composite",
    "Capability",
    "compose_optics",
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
